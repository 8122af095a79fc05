"""
Load every configured dataset the same way the app does and print a one-line
report per dataset. Exit code is non-zero if any dataset fails to load.

    python scripts/check_datasets.py [config_root]
"""
import sys
from pathlib import Path

from covid_browser.config.loader import load_dataset_registry
from covid_browser.core.dataset_loader import from_config
from covid_browser.core.exceptions import CovidBrowserError

BASE_DIR = Path(__file__).parent.parent


def check_datasets(config_root: Path) -> int:
    global_config, cfg_by_name = load_dataset_registry(config_root)

    print(f"{'DATASET':<30} | {'ROWS':>7} | {'COUNTIES':>8} | {'DATES':<25} | STATUS")
    print("-" * 90)

    failures = 0
    for name, cfg in sorted(cfg_by_name.items()):
        try:
            ds = from_config(cfg, global_config.data_root)
        except CovidBrowserError as e:
            failures += 1
            print(f"{name:<30} | {'-':>7} | {'-':>8} | {'-':<25} | ERROR: {e}")
            continue

        valid = ds.valid_sets()
        span = f"{valid.min_date} to {valid.max_date}" if valid.min_date else "-"
        print(f"{name:<30} | {len(ds):>7} | {len(valid.counties):>8} | {span:<25} | OK")

    return 1 if failures else 0


if __name__ == "__main__":
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else BASE_DIR / "config"
    sys.exit(check_datasets(root))
