#!/usr/bin/env python3
"""
Batch processing of files and directory trees.

File mode:
    Every non-blank line of the UTF-8 input is one document. Documents are
    annotated in order and their serializations appended to one output file.
    A read, decode or write failure aborts the file with IOFailure; output
    already written stays on disk.

Directory mode:
    All regular files below the input directory (walked with an explicit
    stack, OS metadata files such as .DS_Store skipped) are processed in
    file mode into <output dir>/<relative dir>/<name>.out. A failing file is
    logged and recorded in the BatchReport, as is a subdirectory that cannot
    be listed, and the remaining files are still processed.
"""

from pathlib import Path
from typing import Callable, List, Optional, Union
from logging import getLogger

from pydantic import BaseModel, Field
from tqdm import tqdm

from vncorenlp.config import OUTPUT_SUFFIX, parse_format
from vncorenlp.exceptions import IOFailure
from vncorenlp.serializer import serialize

logger = getLogger(__name__)


# Filesystem metadata entries that are never input documents
IGNORED_FILE_NAMES = frozenset({".DS_Store", "Thumbs.db", "desktop.ini"})

PathLike = Union[str, Path]


class FileFailure(BaseModel):
    path: Path
    error: str


class BatchReport(BaseModel):
    """Outcome of a directory run."""

    processed: List[Path] = Field(default_factory=list, description="Input files written successfully")
    failed: List[FileFailure] = Field(default_factory=list, description="Input files that raised")

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def total(self) -> int:
        return len(self.processed) + len(self.failed)


def default_output_file(fin: PathLike) -> Path:
    """<input>.out next to the input file."""
    fin = Path(fin)
    return fin.with_name(fin.name + OUTPUT_SUFFIX)


def list_files(directory: PathLike, on_error: Optional[Callable[[Path, OSError], None]] = None) -> List[Path]:
    """
    All regular files below a directory, sorted by path.

    Directories are only descended into (symlinked directories are not
    followed). Names in IGNORED_FILE_NAMES are skipped.

    Args:
        directory: Root directory
        on_error: Called with a subdirectory that cannot be listed and the
            error; the walk then continues with the remaining directories.
            Without it such errors raise IOFailure.

    Raises:
        IOFailure: if the root does not exist or cannot be listed
    """
    root = Path(directory)
    if not root.is_dir():
        raise IOFailure(f"Input directory not found: {root}")

    files = []
    stack = [root]
    while stack:
        current = stack.pop()
        try:
            entries = list(current.iterdir())
        except OSError as e:
            if current == root or on_error is None:
                raise IOFailure(f"Cannot list directory {current}: {e}") from e
            on_error(current, e)
            continue

        for entry in entries:
            if entry.is_dir():
                if not entry.is_symlink():
                    stack.append(entry)
            elif entry.is_file() and entry.name not in IGNORED_FILE_NAMES:
                files.append(entry)

    return sorted(files)


def output_path_for(fin: Path, din: Path, dout: Path) -> Path:
    """Map an input file below din to its output file below dout."""
    relative = fin.relative_to(din)
    return dout / relative.parent / (relative.name + OUTPUT_SUFFIX)


def process_file(pipeline, fin: PathLike, fout: Optional[PathLike] = None, output_format: Optional[str] = None) -> int:
    """
    Annotate a file line by line.

    Args:
        pipeline: Initialized VnCoreNLPPipeline
        fin: UTF-8 input file, one document per line
        fout: Output file (default: <fin>.out)
        output_format: inline or column (default: the pipeline's format)

    Returns:
        Number of documents written

    Raises:
        InvalidConfiguration: unsupported format (nothing is opened)
        IOFailure: input or output failure
    """
    output_format = parse_format(output_format or pipeline.config.output_format)
    fin = Path(fin)
    fout = Path(fout) if fout else default_output_file(fin)

    logger.info(f"Start processing {fin}")
    documents = 0
    try:
        with open(fin, encoding="utf-8") as reader:
            fout.parent.mkdir(parents=True, exist_ok=True)
            with open(fout, "w", encoding="utf-8") as writer:
                for line in reader:
                    line = line.strip()
                    if not line:
                        continue
                    annotation = pipeline.annotate(line)
                    writer.write(serialize(annotation, output_format))
                    documents += 1
    except UnicodeDecodeError as e:
        raise IOFailure(f"{fin} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise IOFailure(f"Failed processing {fin} -> {fout}: {e}") from e

    logger.info(f"Wrote output to {fout} ({documents} documents)")
    return documents


def process_directory(
    pipeline,
    din: PathLike,
    dout: Optional[PathLike] = None,
    output_format: Optional[str] = None,
    show_progress: bool = True,
) -> BatchReport:
    """
    Annotate every file below a directory.

    Args:
        pipeline: Initialized VnCoreNLPPipeline, shared by all files
        din: Input directory
        dout: Output directory (default: din)
        output_format: inline or column (default: the pipeline's format)
        show_progress: Show a tqdm progress bar

    Returns:
        BatchReport listing processed and failed input files, plus any
        subdirectory that could not be listed
    """
    output_format = parse_format(output_format or pipeline.config.output_format)
    din = Path(din)
    dout = Path(dout) if dout else din

    report = BatchReport()

    def skip_directory(directory: Path, error: OSError) -> None:
        logger.error(f"Cannot list directory {directory}: {error}")
        report.failed.append(FileFailure(path=directory, error=f"Cannot list directory: {error}"))

    files = list_files(din, on_error=skip_directory)
    logger.info(f"Found {len(files)} files in {din}")

    for fin in tqdm(files, desc="Annotating", unit="file", disable=not show_progress):
        fout = output_path_for(fin, din, dout)
        try:
            process_file(pipeline, fin, fout, output_format)
        except Exception as e:
            logger.error(f"Failed to process {fin}: {e}", exc_info=True)
            report.failed.append(FileFailure(path=fin, error=str(e)))
        else:
            report.processed.append(fin)

    logger.info(f"Processed {len(report.processed)}/{report.total} files, {len(report.failed)} failed")
    return report
