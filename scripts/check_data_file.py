import argparse
from pathlib import Path

from gacha_browser.config.loader import load_global_config
from gacha_browser.core.dataset_loader import decode_text, read_source_bytes
from gacha_browser.core.exceptions import GachaBrowserError
from gacha_browser.core.table_parser import parse_table_report

BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"


def check_data_file(source=None):
    cfg = load_global_config(CONFIG_DIR)
    source = source or cfg.data_source

    print(f"{'SOURCE':<12} | {source}")
    print("-" * 60)

    try:
        text = decode_text(read_source_bytes(source, timeout=cfg.request_timeout), str(source))
        report = parse_table_report(text, location_columns=cfg.location_columns)
    except GachaBrowserError as e:
        print(f"{'STATUS':<12} | ❌ {e}")
        return False

    dataset = report.dataset
    print(f"{'ROWS':<12} | {len(dataset)}")
    print(f"{'SKIPPED':<12} | {report.skipped_lines}")
    print(f"{'PCT -> 0.0':<12} | {report.percent_fallbacks}")
    print(f"{'LOCATIONS':<12} | {len(dataset.locations)}")
    for location in dataset.sorted_locations():
        count = sum(1 for r in dataset if r.location == location)
        print(f"{'':<12} |   {location:<30} {count:>5} rows")
    print(f"{'STATUS':<12} | ✅ OK")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Parse a drop-table file and print a summary.")
    parser.add_argument("source", nargs="?", help="File path or URL (defaults to config/global.json)")
    args = parser.parse_args()
    raise SystemExit(0 if check_data_file(args.source) else 1)
