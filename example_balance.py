"""Example: print the account balance and the GHS/BTC spread.

Credentials are read from CEXIO_USER, CEXIO_API_KEY and CEXIO_API_SECRET.
"""

import os

from cexio_sdk import ExchangeClient, LogLevel, Ok, ServiceError


def main():
    with ExchangeClient(
        user=os.environ.get("CEXIO_USER"),
        api_key=os.environ.get("CEXIO_API_KEY"),
        api_secret=os.environ.get("CEXIO_API_SECRET"),
        log_level=LogLevel.INFO,
    ) as client:
        book = client.order_book("GHS/BTC")
        if isinstance(book, Ok) and book.data.spread() is not None:
            print(f"Spread is {book.data.spread():0.8f} BTC")

        balance = client.balance()
        if isinstance(balance, ServiceError):
            print(f"Service refused the request: {balance.error}")
        elif isinstance(balance, Ok):
            ghs = balance.data.currencies.get("GHS")
            if ghs:
                print(f"You have {ghs.available:0.2f} GH available and {ghs.orders:0.2f} GH in orders")


if __name__ == "__main__":
    main()
