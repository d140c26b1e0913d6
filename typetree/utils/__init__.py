# typetree utilities
from .logging import log, logWarning, logError, logDebug, init_logging, close_logging, print_summary, get_counts
from .guid import UnityGUID, read_guid, write_guid
from .binary import BinaryWriter
