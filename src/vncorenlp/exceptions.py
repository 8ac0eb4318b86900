"""
Exceptions shared across the vncorenlp package.

- InvalidConfiguration   : unknown annotator, unsupported format, bad input selection
- StageContractViolation : a collaborator returned misaligned or out-of-range output
- StageLoadError         : a collaborator's model or lexicon could not be loaded
- IOFailure              : reading or writing a batch file failed
"""


class VnCoreNLPError(Exception):
    """Base class for every error raised by the pipeline."""
    pass


class InvalidConfiguration(VnCoreNLPError, RuntimeError):
    """Pipeline configuration rejected before any stage or file is touched."""
    pass


class StageContractViolation(VnCoreNLPError, RuntimeError):
    """A stage collaborator broke its length or head-index contract."""
    pass


class StageLoadError(VnCoreNLPError, IOError):
    """Stage resources (spaCy model, lexicon file) failed to load."""
    pass


class IOFailure(VnCoreNLPError, IOError):
    """Input or output file could not be read, decoded or written."""
    pass
