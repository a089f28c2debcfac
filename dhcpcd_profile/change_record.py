from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class ChangeRecord:
    """Records a profile replacement or a whole-document replacement"""
    change_id: str
    timestamp: datetime
    profile: Optional[str]
    removed_lines: List[str] = field(default_factory=list)
    added_lines: List[str] = field(default_factory=list)
    change_type: str = "profile_replacement"
    source_operation: Optional[str] = None

    def summary(self) -> str:
        """One-line description used in log messages"""
        target = f"profile {self.profile}" if self.profile else "document"
        return (f"{self.change_type} of {target} - removed {len(self.removed_lines)} lines, "
                f"added {len(self.added_lines)} lines")
