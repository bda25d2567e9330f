from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import Clock, epoch_millis, now_local
from ..core.constants import PAYSLIP_FILE_PREFIX
from ..core.enums import ExportFormat
from ..core.exceptions import DownloadExpiredError
from ..payroll.model import Payslip
from .token import DownloadToken
from .writer import DocumentWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    payslip: Payslip
    text_path: str
    pdf_path: str


class PayslipExporter:
    """Use case: download a payslip.

    The "pdf" export is a placeholder: it holds the same text as the ``.txt``
    file, only the name differs.
    """

    def __init__(self, writer: DocumentWriter, *, clock: Clock = now_local):
        self._writer = writer
        self._clock = clock

    def file_name(self, payslip: Payslip, fmt: ExportFormat) -> str:
        return f"{PAYSLIP_FILE_PREFIX}_{payslip.emp_id}_{epoch_millis(self._clock())}.{fmt.value}"

    def save(self, payslip: Payslip, fmt: ExportFormat) -> str:
        return self._writer.write(self.file_name(payslip, fmt), payslip.to_text())

    def export(self, payslip: Payslip, token: Optional[DownloadToken] = None) -> ExportResult:
        token = token or DownloadToken.issue(now=self._clock())
        if token.is_expired(self._clock()):
            raise DownloadExpiredError("Download link expired.")

        copy = payslip.clone()
        text_path = self.save(copy, ExportFormat.TEXT)
        pdf_path = self.save(copy, ExportFormat.PDF)
        logger.info("Exported payslip %s/%s to %s and %s", copy.emp_id, copy.month, text_path, pdf_path)
        return ExportResult(payslip=copy, text_path=text_path, pdf_path=pdf_path)
