from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import admin_required, current_caller, json_ok, request_payload
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from .service import RegistrationForm


def register(app: Flask, container: Container) -> None:
    @app.route("/api/Account/Login", methods=["POST"], endpoint="account_login")
    def login():
        try:
            payload = request_payload()
            s_user = container.auth_service.authenticate(
                payload.get_str("EmailAddress") or "",
                payload.get_str("Password") or "",
            )
        except AuthenticationError as e:
            return str(e), 401
        except ValidationError as e:
            return str(e), 400

        session.clear()
        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value

        return jsonify(
            {
                "message": "Login successful",
                "userId": s_user.user_id,
                "roles": [s_user.role.value],
                "isAdmin": s_user.is_admin,
            }
        )

    @app.route("/api/Account/Register", methods=["POST"], endpoint="account_register")
    def register_account():
        try:
            payload = request_payload()
            form = RegistrationForm(
                email_address=payload.get_str("EmailAddress"),
                password=payload.get_str("Password"),
                confirm_password=payload.get_str("ConfirmPassword"),
                first_name=payload.get_str("FirstName"),
                last_name=payload.get_str("LastName"),
                employee_number=payload.get_str("EmployeeNumber"),
                group=payload.get_str("Group"),
            )
            container.account_service.register(form)
        except ValidationError as e:
            if e.errors:
                return jsonify({"message": str(e), "errors": e.errors}), 400
            return str(e), 400

        return "Registration successful. You can now log in.", 200

    @app.route("/api/Account/Logout", methods=["POST"], endpoint="account_logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out successfully"})

    @app.route("/api/Admin", methods=["GET"], endpoint="admin_users")
    @admin_required
    def list_users():
        return json_ok(container.user_service.list_users(current_caller()))
