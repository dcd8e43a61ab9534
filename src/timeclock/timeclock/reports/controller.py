from __future__ import annotations

import io

from flask import Flask, send_file

from ..common.web import admin_required, error_response, json_ok, query_payload
from ..core.constants import JOB_DETAILS_FILENAME, WORKBOOK_FILENAME, XLSX_MIMETYPE
from ..core.exceptions import DomainError
from ..container import Container


def _xlsx(content: bytes, filename: str):
    return send_file(io.BytesIO(content), mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=filename)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/Admin/ExportToExcel", methods=["GET"], endpoint="admin_export_excel")
    @admin_required
    def export_to_excel():
        try:
            query = query_payload()
            content = container.report_service.export_time_workbook(
                query.get_str("group"),
                query.get_date("startDate"),
                query.get_date("endDate"),
            )
        except DomainError as e:
            return error_response(e)
        return _xlsx(content, WORKBOOK_FILENAME)

    @app.route("/api/Admin/ExportJobDetailsToExcel", methods=["GET"], endpoint="admin_export_job_details")
    @admin_required
    def export_job_details():
        content = container.report_service.export_job_details(query_payload().get_str("searchTerm"))
        return _xlsx(content, JOB_DETAILS_FILENAME)

    @app.route("/api/Admin/JobDetails", methods=["GET"], endpoint="admin_job_details")
    @admin_required
    def job_details():
        return json_ok(container.report_service.job_details(query_payload().get_str("searchTerm")))
