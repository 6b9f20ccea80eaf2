import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

# 幫助測試，產生兩天的模擬 log

# Generator Configuration
OUTPUT_DIR = Path(".")
CUSTOMER_COUNT = 500
PAGE_COUNT = 20
VISITS_PER_DAY = 2000

def write_day_log(path: Path, day_start: datetime, visits: int) -> None:
    seconds_in_day = 24 * 60 * 60
    with open(path, "w", encoding="utf-8") as f:
        for _ in range(visits):
            ts = day_start + timedelta(seconds=random.randrange(seconds_in_day))
            page_id = f"page_{random.randrange(PAGE_COUNT):02d}"
            customer_id = f"cust_{random.randrange(CUSTOMER_COUNT):04d}"
            f.write(f"{ts.isoformat()} {page_id} {customer_id}\n")

def main():
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"Generating {VISITS_PER_DAY} visits/day for {CUSTOMER_COUNT} customers...")
    day1 = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0) - timedelta(days=1)

    for i, day_start in enumerate([day1, day1 + timedelta(days=1)], start=1):
        path = output_dir / f"day{i}.txt"
        write_day_log(path, day_start, VISITS_PER_DAY)
        print(f"Wrote {path}")

    print("Finished!")
    print(f"Run: loyal-customers {output_dir / 'day1.txt'} {output_dir / 'day2.txt'}")

if __name__ == "__main__":
    main()
