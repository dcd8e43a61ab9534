from __future__ import annotations

from flask import Flask, request

from ..common.web import (
    admin_required,
    error_response,
    json_ok,
    login_required,
    query_payload,
    request_payload,
)
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .model import Job


def register(app: Flask, container: Container) -> None:
    @app.route("/api/Jobs", methods=["GET"], endpoint="jobs_list")
    @login_required
    def list_jobs():
        try:
            query = query_payload()
            page = container.job_service.list_page(
                query.get_str("searchTerm"),
                page_number=query.get_int("pageNumber", 1),
                page_size=query.get_optional_int("pageSize"),
            )
        except DomainError as e:
            return error_response(e)
        return json_ok(page)

    @app.route("/api/Jobs/<int:job_id>", methods=["GET"], endpoint="jobs_get")
    @login_required
    def get_job(job_id: int):
        try:
            return json_ok(container.job_service.get(job_id))
        except DomainError as e:
            return error_response(e)

    @app.route("/api/Jobs", methods=["POST"], endpoint="jobs_submit")
    @login_required
    def submit_job():
        try:
            payload = request_payload()
            job = payload.section("JobModel") or payload
            staged = container.job_service.submit_created(job.get_str("JobNumber"), job.get_str("JobName"))
        except DomainError as e:
            return error_response(e)
        return json_ok(staged, 201)

    @app.route("/api/Jobs/<int:job_id>", methods=["PUT"], endpoint="jobs_update")
    @admin_required
    def update_job(job_id: int):
        try:
            payload = request_payload()
            job = Job(
                id=payload.get_int("Id"),
                job_number=payload.get_str("JobNumber") or "",
                job_name=payload.get_str("JobName") or "",
            )
            container.job_service.update(job_id, job)
        except DomainError as e:
            return error_response(e)
        return "", 204

    @app.route("/api/Jobs/<int:job_id>", methods=["DELETE"], endpoint="jobs_delete")
    @admin_required
    def delete_job(job_id: int):
        try:
            container.job_service.delete(job_id)
        except DomainError as e:
            return error_response(e)
        return "Job deleted successfully.", 200

    @app.route("/api/Jobs/Details/<job_number>", methods=["GET"], endpoint="jobs_details")
    @login_required
    def job_details(job_number: str):
        return json_ok(container.job_service.details(job_number))

    @app.route("/api/Jobs/Import", methods=["POST"], endpoint="jobs_import")
    @admin_required
    def import_jobs():
        upload = request.files.get("file")
        try:
            if upload is None or not upload.filename:
                raise ValidationError("A CSV file is required.")
            result = container.job_service.import_csv(upload.stream)
        except DomainError as e:
            return error_response(e)
        return json_ok(result)
