#!/usr/bin/env python3
"""
Seed script to upload faceclaims for a test character via the API.

Run:
    python seed/seed_faceclaims.py \
      --api-url <BASE-URL> \
      --token <API-TOKEN> \
      --image-url https://example.org/tiltowait.webp
"""

import argparse
import sys

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed faceclaims via the Faceclaim API")

    parser.add_argument("--api-url", required=True, help="Base API URL")
    parser.add_argument("--token", required=True, help="Value for the Authorization header")
    parser.add_argument("--image-url", required=True, help="Source image to ingest")
    parser.add_argument("--charid", default="__test", help="Character to own the faceclaims")
    parser.add_argument("--bucket", default=None, help="Optional bucket override")
    parser.add_argument("--guild", type=int, default=0)
    parser.add_argument("--user", type=int, default=0)
    parser.add_argument(
        "--count",
        type=int,
        default=3,
        help="Number of faceclaims to upload",
    )

    return parser.parse_args()


def seed_faceclaims() -> None:
    try:
        args = parse_args()

        upload_url = f"{args.api_url.rstrip('/')}/faceclaim/upload"
        headers = {"Authorization": args.token}
        payload: dict[str, object] = {
            "guild": args.guild,
            "user": args.user,
            "charid": args.charid,
            "image_url": args.image_url,
        }
        if args.bucket:
            payload["bucket"] = args.bucket

        logger.info("Starting seeding process", extra={"upload_url": upload_url})

        failures = 0
        for _ in range(args.count):
            response = requests.post(upload_url, headers=headers, json=payload, timeout=60)

            if response.status_code == 201:
                logger.info("Seeded faceclaim", extra={"url": response.json()})
            else:
                failures += 1
                logger.error(
                    "Failed to seed faceclaim",
                    extra={"status": response.status_code, "response": response.text},
                )

        logger.info("Seeding completed", extra={"failures": failures})
        if failures:
            sys.exit(1)

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_faceclaims()
