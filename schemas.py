from pathlib import Path
from pydantic import BaseModel, Field

class LogRecord(BaseModel):
    """
    一行log的資料定義
    """
    timestamp: str = Field(..., min_length=1, description="時間戳記 (不參與統計)")
    page_id: str = Field(..., min_length=1, description="頁面id")
    customer_id: str = Field(..., min_length=1, description="顧客id")

class AnalyzerConfig(BaseModel):
    """
    執行設定，取代全域的 argv
    """
    day1_path: Path = Field(..., description="第一天的log檔")
    day2_path: Path = Field(..., description="第二天的log檔")
    threshold: int = Field(2, ge=1, description="每天至少要看過幾個不同頁面")
