"""Print the pass/fail report for a course's grade sheet."""

import logging
import sys
from typing import Optional, Sequence

from .classify import classify
from .core import DEFAULT_OPTIONS
from .grading import compute_final
from .io import sheet
from . import reports

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read, grade, classify, and print.

    The grade sheet is read from the configured input path, unless a path is
    given as the only argument. More than one argument is a usage error:
    nothing is read, and the exit status is 2.

    """
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    if len(argv) > 1:
        sys.stderr.write("usage: gradesheet [PATH]\n")
        return 2

    options = DEFAULT_OPTIONS
    path = argv[0] if argv else options.input_path
    logger.debug("grading %s", path)

    records = sheet.read(path, options=options)
    graded = compute_final(records, options=options)
    classification = classify(graded, options=options)

    sys.stdout.write(reports.render(classification))
    return 0


if __name__ == "__main__":
    sys.exit(main())
