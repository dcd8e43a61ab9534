from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, error_response, json_ok, login_required, request_payload
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/Tasks", methods=["GET"], endpoint="tasks_list")
    @login_required
    def list_tasks():
        return json_ok(container.catalog_service.list_all())

    @app.route("/api/Tasks/<int:item_id>", methods=["GET"], endpoint="tasks_get")
    @login_required
    def get_task(item_id: int):
        try:
            return json_ok(container.catalog_service.get(item_id))
        except DomainError as e:
            return error_response(e)

    @app.route("/api/Tasks", methods=["POST"], endpoint="tasks_create")
    @admin_required
    def create_task():
        try:
            item = container.catalog_service.create(request_payload().get_str("TaskDescription"))
        except DomainError as e:
            return error_response(e)
        return json_ok(item, 201)

    @app.route("/api/Tasks/<int:item_id>", methods=["PUT"], endpoint="tasks_update")
    @admin_required
    def update_task(item_id: int):
        try:
            item = container.catalog_service.update(item_id, request_payload().get_str("TaskDescription"))
        except DomainError as e:
            return error_response(e)
        return json_ok(item)

    @app.route("/api/Tasks/<int:item_id>", methods=["DELETE"], endpoint="tasks_delete")
    @admin_required
    def delete_task(item_id: int):
        try:
            container.catalog_service.delete(item_id)
        except DomainError as e:
            return error_response(e)
        return "", 204
