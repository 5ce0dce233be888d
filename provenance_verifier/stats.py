
from dataclasses import dataclass, replace
from typing import Dict, Union

from .status import CREDENTIAL_STATUSES, StatusCode


@dataclass(frozen=True)
class VerificationStats:
    images_checked: int = 0
    credentials_found: int = 0

    def record(self, status: Union[StatusCode, str]) -> "VerificationStats":
        try:
            code = StatusCode(status)
        except ValueError:
            code = None
        found = self.credentials_found + (1 if code in CREDENTIAL_STATUSES else 0)
        return replace(self, images_checked=self.images_checked + 1, credentials_found=found)

    def success_rate(self) -> float:
        """Percentage of checked images that carried credentials, one decimal."""
        if self.images_checked == 0:
            return 0.0
        return round(self.credentials_found / self.images_checked * 100, 1)

    def to_dict(self) -> Dict[str, Union[int, float]]:
        return {
            'images_checked': self.images_checked,
            'credentials_found': self.credentials_found,
            'success_rate': self.success_rate(),
        }
