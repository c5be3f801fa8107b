"""Minimal example sending a few records to a local Graylog input."""

from __future__ import annotations

import gelflog


def charge(order_id: int) -> None:
    raise RuntimeError(f"card declined for order {order_id}")


def main() -> None:
    client = gelflog.configure(
        {
            "server": "127.0.0.1",
            "input_port": 12201,
            "app_name": "gelflog-demo",
            "app_version": "0.1.0",
            "environment": "DEV",
            "show_console": True,
        }
    )

    client.info("service started", {"workers": 4})
    for order_id in range(1, 3):
        try:
            charge(order_id)
        except RuntimeError as exc:
            client.error("payment failed", {"order_id": order_id, "cause": exc})


if __name__ == "__main__":
    main()
