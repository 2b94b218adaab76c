"""Protocol definitions for injectable components."""

from doccatalog.protocols.clock import Clock
from doccatalog.protocols.id_generator import IdGenerator
from doccatalog.protocols.upload_source import UploadSource

__all__ = ["Clock", "IdGenerator", "UploadSource"]
