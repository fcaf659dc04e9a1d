from dataclasses import dataclass


@dataclass(frozen=True)
class ArchivedDocumentRef:
    """Where an archived source document lives and how to reach it publicly."""

    storage_path: str
    public_url: str
