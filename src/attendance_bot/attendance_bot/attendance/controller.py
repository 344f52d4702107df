from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..core.exceptions import InternalError, ValidationError
from ..container import Container
from ..messaging.bitrix import parse_bitrix_webhook, unflatten_form
from ..messaging.dispatcher import StaticProfileProvider
from ..messaging.emulator import decision_to_dict, parse_emulator_message
from ..messaging.telegram import parse_telegram_update, profile_from_update

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def backend_required(name: str):
        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                client = getattr(container, name)
                if client is None or not client.configured:
                    return jsonify({"success": False, "message": f"{name} backend is not configured"}), 503
                return view(client, *args, **kwargs)

            return wrapper

        return decorator

    @app.route("/webhook/bitrix", methods=["POST"], endpoint="bitrix_webhook")
    @backend_required("bitrix")
    def bitrix_webhook(bitrix):
        payload = request.get_json(silent=True) or unflatten_form(request.form)
        try:
            message = parse_bitrix_webhook(payload)
            if message is None:
                return jsonify({"success": True, "message": "ignored"})

            decision = container.resolver.handle(message, profiles=bitrix)
            bitrix.send(message.dialog_id, decision.text, decision.quick_replies)
            return jsonify({"success": True, "outcome": decision.outcome.value})
        except ValidationError as e:
            logger.warning("Rejected Bitrix24 webhook: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Bitrix24 webhook processing failed")
            return jsonify({"success": False, "message": "Internal server error"}), 500

    @app.route("/webhook/telegram", methods=["POST"], endpoint="telegram_webhook")
    @backend_required("telegram")
    def telegram_webhook(telegram):
        update = request.get_json(silent=True) or {}
        try:
            message = parse_telegram_update(update)
            if message is None:
                return jsonify({"success": True, "message": "ignored"})

            profiles = StaticProfileProvider(profile_from_update(update))
            decision = container.resolver.handle(message, profiles=profiles)
            telegram.send(message.dialog_id, decision.text, decision.quick_replies)
            return jsonify({"success": True, "outcome": decision.outcome.value})
        except ValidationError as e:
            logger.warning("Rejected Telegram update: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Telegram update processing failed")
            return jsonify({"success": False, "message": "Internal server error"}), 500

    @app.route("/bot/message", methods=["POST"], endpoint="emulator_message")
    def emulator_message():
        payload = request.get_json(silent=True) or {}
        try:
            message = parse_emulator_message(payload)
            decision = container.resolver.handle(message)
            return jsonify({"success": True, **decision_to_dict(decision)})
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except InternalError:
            logger.exception("Emulator message processing failed")
            return jsonify({"success": False, "message": "Internal server error"}), 500
