import pytest

from chainstack_snap.events import ButtonClickEvent, InputChangeEvent, user_input_from_json
from chainstack_snap.ui import address, button, collect_text, heading, input_field, panel, row, text


def test_collect_text_walks_rows():
    ui = panel([heading("Title"), row("Recipient", address("0x1")), text("body"), button("Send", "send-it")])
    assert collect_text(ui) == ["Title", "0x1", "body"]


def test_input_field_optional_keys():
    assert input_field("api-key-input") == {"type": "input", "name": "api-key-input"}
    assert input_field("a", placeholder="p", value="v") == {"type": "input", "name": "a", "placeholder": "p", "value": "v"}


def test_user_input_from_json_input_change():
    event = user_input_from_json({"type": "InputChangeEvent", "name": "api-key-input", "value": "k"}, "interface-1")
    assert event == InputChangeEvent(name="api-key-input", value="k", interface_id="interface-1")


def test_user_input_from_json_button_click():
    event = user_input_from_json({"type": "ButtonClickEvent", "name": "send-it"})
    assert event == ButtonClickEvent(name="send-it")


def test_user_input_from_json_rejects_unknown_type():
    with pytest.raises(ValueError, match="Unsupported user input event type"):
        user_input_from_json({"type": "FormSubmitEvent", "name": "form"})
