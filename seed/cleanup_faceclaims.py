#!/usr/bin/env python3
"""
Cleanup script to queue deletion of a character's faceclaims via the API.

Run:
    python seed/cleanup_faceclaims.py \
      --api-url <BASE-URL> \
      --token <API-TOKEN> \
      --bucket pcs.inconnu.app \
      --charid __test
"""

import argparse
import sys
from urllib.parse import quote

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Delete seeded faceclaims via the Faceclaim API")

    parser.add_argument("--api-url", required=True, help="Base API URL")
    parser.add_argument("--token", required=True, help="Value for the Authorization header")
    parser.add_argument("--bucket", required=True, help="Bucket holding the faceclaims")
    parser.add_argument("--charid", default="__test", help="Character whose faceclaims are deleted")

    return parser.parse_args()


def cleanup_faceclaims() -> None:
    try:
        args = parse_args()

        delete_url = (
            f"{args.api_url.rstrip('/')}/faceclaim/delete/"
            f"{quote(args.bucket, safe='')}/{quote(args.charid, safe='')}/all"
        )

        logger.info(
            "Starting cleanup process",
            extra={"delete_url": delete_url, "charid": args.charid},
        )

        response = requests.delete(
            delete_url,
            headers={"Authorization": args.token},
            timeout=30,
        )

        if not response.ok:
            logger.error(
                "Failed to queue deletion",
                extra={"status": response.status_code, "response": response.text},
            )
            sys.exit(1)

        # Deletion happens asynchronously after this point
        logger.info("Cleanup queued", extra={"response": response.json()})

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_faceclaims()
