import os, sys, json, logging, pathlib, requests

from .catalog import OUTPUT_FILE_NAME
from .fetch import fetch_all, ConversionError
from .normalize import Resolution, resolve, sort_conversions

log = logging.getLogger(__name__)


def default_output_path() -> pathlib.Path:
    return pathlib.Path(os.getenv("BAZAAR_CONVERSIONS_OUTPUT") or pathlib.Path.cwd() / OUTPUT_FILE_NAME)


def write_conversions(conversions: dict[str, str], path: pathlib.Path) -> int:
    """Overwrite `path` with the conversions as key-sorted, 2-space indented JSON."""
    ordered = sort_conversions(conversions)
    path.write_text(json.dumps(ordered, indent=2, ensure_ascii=False), encoding="utf-8")
    return len(ordered)


def run(output_path: pathlib.Path | None = None) -> Resolution:
    out = pathlib.Path(output_path) if output_path is not None else default_output_path()
    bazaar, items = fetch_all()

    product_ids = bazaar.product_ids
    log.info("Bazaar currently lists %d product IDs.", len(product_ids))

    res = resolve(product_ids, items.items)

    n = write_conversions(res.conversions, out)
    log.info("Wrote %d bazaar conversions to %s", n, out)
    if res.missing:
        log.info("NOTE: %d product IDs not present in items API. Used fallback prettifier.\n%s",
                 len(res.missing), ", ".join(res.missing))
    return res


def main() -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        run()
    except (ConversionError, requests.RequestException) as e:
        log.error("Failed to generate bazaar conversions: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
