from pathlib import Path

from property_importer.config.settings import Settings
from property_importer.storage.base import BaseArtifactArchiver
from property_importer.storage.local_archiver import LocalArtifactArchiver
from property_importer.storage.supabase_archiver import SupabaseStorageArchiver


class ArchiverFactory:
    """Creates the archiver for the configured storage backend."""

    BACKENDS = ("local", "supabase")

    @classmethod
    def create(cls, settings: Settings) -> BaseArtifactArchiver:
        backend = settings.storage_backend.strip().lower()
        if backend == "local":
            return LocalArtifactArchiver(
                root=Path(settings.storage_root),
                public_base_url=settings.storage_public_base_url,
                bucket=settings.storage_bucket,
                prefix=settings.storage_archive_prefix,
            )
        if backend == "supabase":
            return SupabaseStorageArchiver(
                url=settings.supabase_url,
                api_key=settings.supabase_key,
                bucket=settings.storage_bucket,
                prefix=settings.storage_archive_prefix,
                timeout_seconds=settings.storage_timeout_seconds,
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
