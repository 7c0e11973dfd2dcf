from dataclasses import dataclass, field
import pandas as pd

from .names import format_name


@dataclass
class Resolution:
    conversions: dict[str, str] = field(default_factory=dict)
    missing: list[str] = field(default_factory=list)


def items_frame(items: list) -> pd.DataFrame:
    rows = [(it["id"], it.get("name")) for it in items if isinstance(it, dict) and isinstance(it.get("id"), str)]
    df = pd.DataFrame(rows, columns=["id", "name"], dtype=object)
    # later entries win, same as filling a dict in order
    return df.drop_duplicates(subset="id", keep="last")


def resolve(listing_ids, items: list) -> Resolution:
    """
    Name every bazaar listing, using the item catalog where it has an entry.

    Args:
        listing_ids: product ids from the bazaar endpoint; all of them end up in the result
        items: raw entries from the items endpoint

    Returns:
        Resolution with one conversion per listing id (listing order) and the
        ids that had no catalog entry
    """
    listings = pd.DataFrame({"id": list(listing_ids)}, dtype=object).drop_duplicates()
    df = listings.merge(items_frame(items), on="id", how="left", indicator=True, validate="one_to_one")

    out = Resolution()
    for item_id, name, source in zip(df["id"], df["name"], df["_merge"]):
        if source == "both":
            out.conversions[item_id] = format_name(name if isinstance(name, str) else None, item_id)
        else:
            # not in the items API, fall back to the id
            out.conversions[item_id] = format_name(None, item_id)
            out.missing.append(item_id)
    return out


def sort_conversions(conversions: dict[str, str]) -> dict[str, str]:
    return {k: conversions[k] for k in sorted(conversions)}
