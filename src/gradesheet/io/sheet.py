"""Read semicolon-delimited grade sheets."""

import logging
import pathlib as _pathlib
from typing import Dict, List, Optional, Tuple, Union

from ..core import DEFAULT_OPTIONS, GradesheetOptions, Records, StudentRecord

logger = logging.getLogger(__name__)


def _split(line: str, delimiter: str) -> List[str]:
    return line.rstrip("\r\n").split(delimiter)


def read_fields(
    path: Union[str, _pathlib.Path], *, delimiter: str = ";"
) -> Tuple[List[str], List[Dict[str, str]]]:
    """Read the header and the well-formed rows of a grade sheet.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the grade sheet.
    delimiter : str
        The cell separator. Default: ``";"``.

    Returns
    -------
    Tuple[List[str], List[Dict[str, str]]]
        The column names and, for every row with as many cells as the header,
        a mapping from column name to cell. Rows of any other length are
        skipped. If the file is empty, both lists are empty.

    Raises
    ------
    OSError
        If the file cannot be opened.

    """
    path = _pathlib.Path(path)

    rows = []
    skipped = 0
    with path.open(encoding="utf-8-sig") as fileobj:
        header_line = fileobj.readline()
        if not header_line:
            logger.debug("%s is empty", path)
            return [], []

        header = _split(header_line, delimiter)

        for line in fileobj:
            values = _split(line, delimiter)
            if len(values) == len(header):
                rows.append(dict(zip(header, values)))
            else:
                skipped += 1

    logger.debug("read %d rows from %s (%d skipped)", len(rows), path, skipped)
    return header, rows


def read(
    path: Union[str, _pathlib.Path],
    *,
    options: Optional[GradesheetOptions] = None,
) -> Records:
    """Read a grade sheet into records sorted by surname.

    The first line of the file is a header naming the columns; every other
    line is a student. Cells are separated by ``options.delimiter``.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the grade sheet.
    options : Optional[GradesheetOptions]
        Default: :data:`gradesheet.core.DEFAULT_OPTIONS`.

    Returns
    -------
    Records
        One record per well-formed row, in ascending order of surname. The
        sort is stable, and rows without a surname sort first.

    """
    if options is None:
        options = DEFAULT_OPTIONS

    _, rows = read_fields(path, delimiter=options.delimiter)
    records = [StudentRecord.from_fields(row) for row in rows]
    return Records(sorted(records, key=lambda r: r.surname))
