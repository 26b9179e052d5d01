#This file is for development purposes only

import logging
import os

from basecamp_client_impl import get_client


def main():
    logging.basicConfig(level=logging.DEBUG if os.environ.get("BASECAMP_DEBUG") else logging.INFO)
    client = get_client(interactive=True)

    bucket_id = input("Bucket (project) id: ").strip()
    card_table_id = input("Card table id: ").strip()

    with client:
        print("\nFetching card table...")
        card_table = client.card_table(bucket_id, card_table_id)
        print(f"- {card_table}")

        # card tables list their columns under "lists"
        for column in card_table.get("lists", []):
            print(f"\nColumn {column.title!r} ({column.get('cards_count', 0)} cards)")
            for card in client.card_table_cards(bucket_id, column.id).auto_paginate(limit=5):
                print(f"  - {card}")


if __name__ == "__main__":
    main()
