"""Detail panel content for the selected record."""

from geodash.i18n import t
from geodash.models import Record


def info_items(record: Record, lang: str = "en") -> list[tuple[str, str]]:
    """(label, value) pairs shown under the project title."""
    return [
        (t("col_latitude", lang), f"{record.latitude:.6f}°"),
        (t("col_longitude", lang), f"{record.longitude:.6f}°"),
        (t("col_id", lang), record.id),
        (t("col_status", lang), record.status),
        (t("col_last_updated", lang), record.last_updated.isoformat()),
        (t("col_coordinates", lang), f"{record.latitude:.6f}, {record.longitude:.6f}"),
    ]
