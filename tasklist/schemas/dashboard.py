from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel

from tasklist.core.constants import TaskStatus


# Dashboard schemas
class DashboardSummary(BaseModel):
    total_records: int
    per_table: Dict[str, int]
    primary_table_count: int
    task_status_counts: Dict[str, int]


class RecentRecord(BaseModel):
    id: int
    name: str
    status: TaskStatus
    updated_at: Optional[datetime] = None
