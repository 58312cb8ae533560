"""Path filter normalization."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from projgen.labels import BuildLabel

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def resolve_path_filters(
    entries: Iterable[str],
    logger: "FilteringBoundLogger",  # noqa: UP037
) -> frozenset[str]:
    """Convert label-or-path filter entries into package paths.

    Each entry is parsed as a build label and its package path kept. Entries
    without a package component are dropped.

    Args:
        entries: Raw filter entries, e.g. ``//app/ios:Main`` or ``app/ios``.
        logger: Logger that receives a warning for every dropped entry.

    Returns:
        Deduplicated package paths.
    """
    result: set[str] = set()
    for entry in entries:
        package = BuildLabel(entry).package_name
        if package is None:
            logger.warning("path_filter_dropped", entry=entry)
            continue
        result.add(package)
    return frozenset(result)
