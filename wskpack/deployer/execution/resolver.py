"""Kind & exec resolver -- turns an action artifact into an ``Exec``.

Resolution order:

1. Load the artifact bytes unless it is a plain docker image reference
   (docker actions shipped as ``.zip`` still load their bundle).
2. Pick the kind: explicit kind, then docker (``blackbox``), then the
   artifact extension.
3. Apply the Java main-class check.
4. Encode the code: base64 for zip bundles and other binary artifacts,
   UTF-8 text for source files.
"""

from __future__ import annotations

import base64
from pathlib import Path

from loguru import logger

from wskpack.deployer.content import ContentLoader, LocalContentReader
from wskpack.deployer.models.enums import JavaGuard
from wskpack.deployer.models.exec import BLACKBOX_KIND, Exec
from wskpack.deployer.settings import DEFAULT_DOCKER_IMAGE

ZIP_EXT = ".zip"
JAR_EXT = ".jar"
JAVA_KIND = "java"

SOURCE_EXTENSIONS = frozenset({".swift", ".js", ".py"})
"""Extensions whose content is shipped as inline source text."""

EXTENSION_KINDS: dict[str, str] = {
    ".swift": "swift:default",
    ".js": "nodejs:default",
    ".py": "python:default",
    JAR_EXT: "java:default",
}
"""Default runtime kind per artifact extension."""

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class UnsupportedInputError(ValueError):
    """The action definition cannot be turned into an exec descriptor."""


class ZipKindError(UnsupportedInputError):
    def __init__(self) -> None:
        super().__init__("creating an action from a .zip artifact requires specifying the action kind explicitly")


class UnsupportedExtensionError(UnsupportedInputError):
    def __init__(self, extension: str) -> None:
        super().__init__(f"'{extension}' is not a supported action runtime")
        self.extension = extension


class JavaEntryError(UnsupportedInputError):
    def __init__(self) -> None:
        super().__init__("Java actions require --main to specify the fully-qualified name of the main class")


class SourceEncodingError(UnsupportedInputError):
    def __init__(self, artifact: str) -> None:
        super().__init__(f"'{artifact}' is not valid UTF-8 source")
        self.artifact = artifact


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve_exec(
    artifact: str | Path,
    kind: str | None = "",
    is_docker: bool = False,
    main_entry: str | None = "",
    *,
    reader: ContentLoader | None = None,
    docker_image: str = DEFAULT_DOCKER_IMAGE,
    java_guard: JavaGuard = JavaGuard.LITERAL,
) -> Exec:
    """Resolve the execution descriptor for one action artifact.

    Parameters
    ----------
    artifact:
        Source file, zip bundle, or (for docker) an image reference.
    kind:
        Explicit runtime kind.  Wins over everything else when non-empty.
    is_docker:
        Build a ``blackbox`` action.
    main_entry:
        Entry point (Java main class).
    reader:
        Content loader; defaults to ``LocalContentReader``.
    docker_image:
        Image used for docker actions shipped as a zip bundle.
    java_guard:
        Which kinds require ``main_entry`` (see ``JavaGuard``).

    Raises
    ------
    ContentReadError:
        The artifact could not be read.
    ZipKindError:
        A ``.zip`` artifact without an explicit kind or docker flag.
    UnsupportedExtensionError:
        No default kind is known for the artifact extension.
    JavaEntryError:
        A Java kind (per ``java_guard``) without ``main_entry``.
    SourceEncodingError:
        A ``.swift``/``.js``/``.py`` artifact that is not valid UTF-8.
    """
    artifact = str(artifact)
    ext = Path(artifact).suffix
    is_zip = ext == ZIP_EXT

    # -- 1. Content ------------------------------------------------------------
    content: bytes | None = None
    if not is_docker or is_zip:
        content = (reader or LocalContentReader()).read_local(artifact)

    # -- 2. Kind ---------------------------------------------------------------
    image: str | None = None
    if kind:
        resolved_kind = kind
    elif is_docker:
        resolved_kind = BLACKBOX_KIND
        image = docker_image if is_zip else artifact
    elif ext in EXTENSION_KINDS:
        resolved_kind = EXTENSION_KINDS[ext]
        if ext == JAR_EXT:
            # Java actions ship the compiled jar, not inline source.
            content = None
    elif is_zip:
        raise ZipKindError
    else:
        raise UnsupportedExtensionError(ext)

    # -- 3. Java entry point ---------------------------------------------------
    main = main_entry or None
    if main is None and _requires_main(resolved_kind, java_guard):
        raise JavaEntryError

    # -- 4. Code ---------------------------------------------------------------
    code = _encode_code(artifact, content, ext)

    logger.debug(
        "Resolved exec for {}: kind={} image={} main={} code={}",
        artifact,
        resolved_kind,
        image,
        main,
        "none" if code is None else f"{len(code)} chars",
    )
    return Exec(kind=resolved_kind, code=code, image=image, main=main)


get_exec = resolve_exec


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _requires_main(kind: str, guard: JavaGuard) -> bool:
    if guard == JavaGuard.NORMALIZED:
        return kind == JAVA_KIND or kind.startswith(f"{JAVA_KIND}:")
    return kind == JAVA_KIND


def _encode_code(artifact: str, content: bytes | None, ext: str) -> str | None:
    if content is None:
        return None
    if ext == ZIP_EXT:
        return base64.b64encode(content).decode("ascii")
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        if ext in SOURCE_EXTENSIONS:
            raise SourceEncodingError(artifact) from None

    # Binary artifact with an explicit kind (e.g. a jar): ship as base64.
    logger.warning("Artifact {} is not UTF-8 text; storing its code as base64", artifact)
    return base64.b64encode(content).decode("ascii")
