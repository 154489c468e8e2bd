"""Testes dos validadores de entrada."""

from __future__ import annotations

import pytest

from whatsapp_cloud.adapters.whatsapp.validators import (
    FLOW_CATEGORIES,
    ValidationError,
    extension_from_mime,
    validate_categories,
    validate_flow_creation,
    validate_list_button,
    validate_migration_names,
    validate_reply_buttons,
    validate_template_data,
    validate_upload_content,
)


def _buttons(count: int) -> dict:
    return {
        "type": "button",
        "body": {"text": "Escolha"},
        "action": {
            "buttons": [
                {"type": "reply", "reply": {"id": f"b{i}", "title": f"Opção {i}"}}
                for i in range(count)
            ]
        },
    }


class TestInteractive:
    def test_three_buttons_ok(self) -> None:
        validate_reply_buttons(_buttons(3))

    def test_four_buttons_rejected(self) -> None:
        with pytest.raises(ValidationError, match="O número máximo de botões é 3."):
            validate_reply_buttons(_buttons(4))

    def test_no_buttons_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_reply_buttons({"action": {}})

    def test_list_requires_action(self) -> None:
        with pytest.raises(ValidationError):
            validate_list_button({"body": "sem ação"})

    def test_validation_error_is_value_error(self) -> None:
        assert issubclass(ValidationError, ValueError)


class TestFlows:
    def test_valid_creation(self) -> None:
        validate_flow_creation({"name": "cadastro", "categories": ["SIGN_UP"]})

    def test_missing_name(self) -> None:
        with pytest.raises(ValidationError, match="name must be provided"):
            validate_flow_creation({"categories": ["SIGN_UP"]})

    def test_invalid_category(self) -> None:
        with pytest.raises(ValidationError, match="Invalid categories: FOO"):
            validate_categories(["SIGN_UP", "FOO"])

    def test_categories_must_be_list(self) -> None:
        with pytest.raises(ValidationError, match="Categories must be a list"):
            validate_categories("SIGN_UP")

    def test_publish_requires_flow_json(self) -> None:
        with pytest.raises(ValidationError, match="flow_json must be provided"):
            validate_flow_creation({"name": "x", "categories": ["OTHER"], "publish": True})

    def test_all_known_categories(self) -> None:
        validate_categories(list(FLOW_CATEGORIES))
        assert len(FLOW_CATEGORIES) == 8

    def test_migration_limit(self) -> None:
        validate_migration_names(None)
        with pytest.raises(ValidationError):
            validate_migration_names([f"flow-{i}" for i in range(101)])


class TestTemplates:
    def _template(self, **overrides) -> dict:
        data = {
            "name": "order_update",
            "category": "UTILITY",
            "language": "pt_BR",
            "components": [{"type": "BODY", "text": "Pedido {{1}} enviado"}],
        }
        data.update(overrides)
        return data

    def test_valid(self) -> None:
        validate_template_data(self._template())

    def test_missing_components(self) -> None:
        data = self._template()
        del data["components"]
        with pytest.raises(ValidationError, match="components must be provided"):
            validate_template_data(data)

    def test_invalid_category(self) -> None:
        with pytest.raises(ValidationError):
            validate_template_data(self._template(category="SPAM"))

    def test_name_too_long(self) -> None:
        with pytest.raises(ValidationError):
            validate_template_data(self._template(name="x" * 513))


class TestMedia:
    def test_extension(self) -> None:
        assert extension_from_mime("image/png") == "png"
        assert extension_from_mime("application/pdf") == "pdf"

    @pytest.mark.parametrize("mime", ["png", "", "image/", "a/b/c"])
    def test_invalid_mime(self, mime: str) -> None:
        with pytest.raises(ValueError, match="Invalid MIME type"):
            extension_from_mime(mime)

    def test_empty_content(self) -> None:
        with pytest.raises(ValidationError):
            validate_upload_content(b"")

    def test_size_limit(self) -> None:
        with pytest.raises(ValidationError):
            validate_upload_content(b"x" * (1024 * 1024 + 1), max_size_mb=1)
