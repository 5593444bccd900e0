"""Artifact packaging."""

from wskpack.deployer.packaging.archive import create_files_zip, create_folder_zip

__all__ = ["create_files_zip", "create_folder_zip"]
