from filezer.report.assembler import TOP_WORDS_HEADER, report_label
from filezer.report.exceptions import ReportParseError
from filezer.report.models import SCALAR_FIELDS


def parse_report_statistics(report: str) -> dict[str, int | float]:
    """Read the scalar section of a rendered report back into values.

    Averages come back as floats rounded to two decimals, counts as ints.

    Raises:
        ReportParseError: if a scalar line is missing or malformed.
    """
    labels = {report_label(name): name for name in SCALAR_FIELDS}
    values: dict[str, int | float] = {}
    for line in report.splitlines():
        if line == TOP_WORDS_HEADER:
            break
        label, sep, raw = line.partition(": ")
        name = labels.get(label)
        if not sep or name is None:
            continue
        values[name] = _parse_value(name, raw)

    missing = [name for name in SCALAR_FIELDS if name not in values]
    if missing:
        raise ReportParseError(f"Report is missing statistics: {missing}")
    return values


def _parse_value(name: str, raw: str) -> int | float:
    cleaned = raw.strip().replace(",", "")
    try:
        if name.startswith("average_"):
            return float(cleaned)
        return int(cleaned)
    except ValueError as exc:
        raise ReportParseError(f"Invalid value for {name}: {raw!r}") from exc
