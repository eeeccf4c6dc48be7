"""Excel Export Service - bulk download of projected records (SoC)"""
from io import BytesIO
from typing import Dict, List
from flask import Response
import pandas as pd
from school_records.config.settings import ReportConfig
from school_records.utils.formatting.json_utils import sanitize_mongo_document

class ExcelExportService:
    """Service for exporting record lists to Excel format"""

    @staticmethod
    def build_workbook(rows: List[Dict], sheet_name: str) -> bytes:
        """Projected rows to .xlsx bytes; nested documents are flattened to dotted columns"""
        df = pd.json_normalize(sanitize_mongo_document(rows)) if rows else pd.DataFrame()

        output = BytesIO()
        with pd.ExcelWriter(output, engine='openpyxl') as writer:
            df.to_excel(writer, sheet_name=sheet_name[:31], index=False)
        return output.getvalue()

    @staticmethod
    def export_to_excel(rows: List[Dict], entity: str) -> Response:
        """Convert projected records to an Excel attachment response"""
        filename = f"{entity}_download.xlsx"

        return Response(
            ExcelExportService.build_workbook(rows, entity),
            mimetype=ReportConfig.EXCEL_MIMETYPE,
            headers={
                'Content-Disposition': f'attachment; filename="{filename}"',
                'Cache-Control': 'no-cache',
                'Access-Control-Expose-Headers': 'Content-Disposition'
            }
        )
