import logging
import sys
from typing import List, Optional

from schemas import AnalyzerConfig
from loganalyzer import FileOpenError, LogParser, LoyaltyFilter, format_report

USAGE = "Usage: loyal-customers day1.txt day2.txt"

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.WARNING) -> None:
    """
    診斷訊息走 stderr，stdout 只留給結果
    """
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger().setLevel(level)


def build_config(args: List[str]) -> AnalyzerConfig:
    return AnalyzerConfig(day1_path=args[0], day2_path=args[1])


def run(config: AnalyzerConfig) -> List[str]:
    parser = LogParser()
    # 依序解析，第一天失敗就不會碰第二天
    day1_map = parser.parse(config.day1_path)
    day2_map = parser.parse(config.day2_path)
    return LoyaltyFilter(config.threshold).filter(day1_map, day2_map)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if len(args) < 2:
        print(USAGE)
        return 1

    setup_logging()
    config = build_config(args)

    try:
        loyal_customers = run(config)
    except FileOpenError as e:
        logger.debug("open failed: %s (%s)", e.path, e.reason)
        print(f"Could not open file: {e.path}")
        return 1

    sys.stdout.write(format_report(loyal_customers))
    return 0


if __name__ == "__main__":
    sys.exit(main())
