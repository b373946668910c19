from __future__ import annotations

from typing import Any, Optional

from web3 import Web3

from chainstack_snap.core.networks import Network
from chainstack_snap.faucet.types import TopUpResult

from .ui import Component, address, button, divider, heading, input_field, panel, row, spinner, text

API_KEY_INPUT = "api-key-input"
SEND_BUTTON = "send-it"


def _display(value: Any) -> str:
    return "" if value is None else str(value)


def api_key_prompt(title: str) -> Component:
    return panel(
        [
            heading(title),
            text("Enter your public API key to receive up to 0.5 testnet ETH from the Chainstack Faucet."),
            input_field(API_KEY_INPUT, placeholder="Enter your public API key here"),
        ]
    )


def recipient_row(recipient: str) -> Component:
    # The host's address component only accepts well-formed hex addresses.
    if Web3.is_address(recipient):
        return row("Recipient", address(Web3.to_checksum_address(recipient)))
    return row("Recipient", text(recipient))


def confirmation(title: str, recipient: str, network: Network) -> Component:
    return panel(
        [
            heading(title),
            text(f"Request testnet {network.currency_symbol} from the Chainstack Faucet."),
            recipient_row(recipient),
            divider(),
            button("Send", SEND_BUTTON),
        ]
    )


def progress(title: str) -> Component:
    return panel([heading(title), text("Sending your request to the faucet..."), spinner()])


def success_message(result: TopUpResult, network: Network) -> str:
    return (
        f"The transaction was successful. You should receive {_display(result.amount_sent)} "
        f"{network.currency_symbol} shortly. Check the transaction here - {_display(result.transaction)}"
    )


def success(title: str, result: TopUpResult, network: Network) -> Component:
    children = [heading(title), text(success_message(result, network))]
    if result.transaction:
        children.append(row("Explorer", text(f"{network.explorer_url}/tx/{result.transaction}")))
    return panel(children)


def failure(title: str, message: Optional[Any]) -> Component:
    return panel([heading(title), text(f"The transaction failed. {_display(message)}".rstrip())])


def error(title: str, detail: Optional[str] = None) -> Component:
    return panel([heading(title), text(f"An error occurred. Please try again later. {_display(detail)}".rstrip())])
