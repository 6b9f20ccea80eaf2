import logging
import re
from collections import defaultdict
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Set, Union

from schemas import LogRecord

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 2

# 只認 ASCII 空白，NBSP 之類算在欄位裡
FIELD_SEPARATOR = re.compile(r"[ \t\n\r\f\v]+")
STRIP_CHARS = " \t\n\r\f\v\0"

# customer_id -> 當天看過的不重複頁面
DailyVisitMap = Dict[str, FrozenSet[str]]


class FileOpenError(OSError):
    """
    log檔無法開啟
    """
    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        message = f"Could not open file: {self.path}"
        super().__init__(message)


class LogParser:

    def parse_line(self, line: str) -> Optional[LogRecord]:
        """
        解析log，欄位不足三個的行直接丟掉
        """
        parts = FIELD_SEPARATOR.split(line.strip(STRIP_CHARS))

        if len(parts) < 3:
            return None

        timestamp, page_id, customer_id = parts[0], parts[1], parts[2]
        return LogRecord(timestamp=timestamp, page_id=page_id, customer_id=customer_id)

    def parse(self, file_path: Union[str, Path]) -> DailyVisitMap:
        customer_pages: Dict[str, Set[str]] = defaultdict(set) # 透過defaultdict簡化init

        try:
            with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
                for line in f:
                    record = self.parse_line(line)
                    if record is None:
                        continue
                    customer_pages[record.customer_id].add(record.page_id)
        except OSError as e:
            raise FileOpenError(file_path, e.strerror) from e

        logger.info("parsed %d customers from %s", len(customer_pages), file_path)
        # 建好之後不再修改
        return {customer_id: frozenset(pages) for customer_id, pages in customer_pages.items()}


class LoyaltyFilter:

    def __init__(self, threshold: int = DEFAULT_THRESHOLD):
        self.threshold = threshold

    def filter(self, day1_map: DailyVisitMap, day2_map: DailyVisitMap) -> List[str]:
        """
        以第一天的順序，找出兩天都有來且每天都看過 threshold 個以上不同頁面的顧客
        """
        loyal_customers = []

        for customer_id, pages_day1 in day1_map.items():
            pages_day2 = day2_map.get(customer_id)
            if pages_day2 is None: # 只有第一天出現
                continue

            if len(pages_day1) >= self.threshold and len(pages_day2) >= self.threshold:
                loyal_customers.append(customer_id)

        logger.info(
            "%d of %d day-1 customers are loyal (threshold=%d)",
            len(loyal_customers), len(day1_map), self.threshold
        )
        return loyal_customers


def find_loyal_customers(
    day1_map: DailyVisitMap,
    day2_map: DailyVisitMap,
    threshold: int = DEFAULT_THRESHOLD,
) -> List[str]:
    return LoyaltyFilter(threshold).filter(day1_map, day2_map)


def format_report(customers: List[str]) -> str:
    lines = ["Loyal Customers ID:"]
    if not customers:
        lines.append("Loyal customers not available.")
    else:
        lines.extend(customers)
    return "\n".join(lines) + "\n"
