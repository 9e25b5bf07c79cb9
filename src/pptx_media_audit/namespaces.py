"""Open XML namespace definitions used when reading presentation parts.

Based on ECMA-376.
"""

# Package relationships (.rels files)
RELATIONSHIPS = "http://schemas.openxmlformats.org/package/2006/relationships"

# Relationship id attributes (r:id, r:embed, r:link)
OFFICE_DOC_RELATIONSHIPS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

# PresentationML
PRESENTATIONML = "http://schemas.openxmlformats.org/presentationml/2006/main"

# DrawingML
DRAWINGML = "http://schemas.openxmlformats.org/drawingml/2006/main"

# Namespace prefix map for lxml slide queries
NSMAP = {
    "p": PRESENTATIONML,
    "a": DRAWINGML,
}


def qualify_name(local_name: str, namespace: str) -> str:
    """Create a Clark notation qualified name {namespace}local_name."""
    return f"{{{namespace}}}{local_name}"
