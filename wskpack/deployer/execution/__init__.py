"""Deployment-plan building blocks.

- **resolver**: artifact + kind + docker flag + main -> ``Exec``
- **web**: web-export mode + annotations -> reconciled annotations
"""
