from unittest.mock import patch

from core.infrastructure.adapters.s3_adapter import S3Adapter
from handlers.process_deletion.handler import handler


def single(key: str, bucket: str = "pcs.inconnu.app") -> dict[str, str]:
    return {
        "action": "delete-single-faceclaim",
        "bucket": bucket,
        "charid": key.split("/", 1)[0],
        "key": key,
    }


def group(charid: str, bucket: str = "pcs.inconnu.app") -> dict[str, str]:
    return {"action": "delete-faceclaim-group", "bucket": bucket, "charid": charid}


class TestProcessDeletionHandler:
    def test_single_delete(self, sqs_event, lambda_context, s3_buckets, s3_put_object, s3_list_keys) -> None:
        s3_put_object("pcs.inconnu.app", "__test/a.webp")
        s3_put_object("pcs.inconnu.app", "__test/b.webp")

        result = handler(sqs_event([single("__test/a.webp")]), lambda_context)

        assert result == {"batchItemFailures": []}
        assert s3_list_keys("pcs.inconnu.app") == ["__test/b.webp"]

    def test_group_delete_leaves_other_characters(
        self, sqs_event, lambda_context, s3_buckets, s3_put_object, s3_list_keys
    ) -> None:
        for name in ("a", "b", "c"):
            s3_put_object("pcs.inconnu.app", f"__test/{name}.webp")
        s3_put_object("pcs.inconnu.app", "__test2/a.webp")

        result = handler(sqs_event([group("__test")]), lambda_context)

        assert result == {"batchItemFailures": []}
        assert s3_list_keys("pcs.inconnu.app") == ["__test2/a.webp"]

    def test_redelivery_is_idempotent(self, sqs_event, lambda_context, s3_buckets, s3_put_object, s3_list_keys) -> None:
        s3_put_object("pcs.inconnu.app", "__test/a.webp")
        event = sqs_event([single("__test/a.webp"), group("__test")])

        assert handler(event, lambda_context) == {"batchItemFailures": []}
        assert handler(event, lambda_context) == {"batchItemFailures": []}
        assert s3_list_keys("pcs.inconnu.app") == []

    def test_malformed_record_reported(self, sqs_event, lambda_context, s3_buckets, s3_put_object, s3_list_keys) -> None:
        s3_put_object("pcs.inconnu.app", "__test/a.webp")
        event = sqs_event(["not-json", {"action": "unknown"}, single("__test/a.webp")])

        result = handler(event, lambda_context)

        assert result == {
            "batchItemFailures": [
                {"itemIdentifier": "msg-0"},
                {"itemIdentifier": "msg-1"},
            ]
        }
        assert s3_list_keys("pcs.inconnu.app") == []

    def test_storage_failure_reported(self, sqs_event, lambda_context, s3_buckets) -> None:
        event = sqs_event([group("__test", bucket="missing-bucket"), group("__test")])

        result = handler(event, lambda_context)

        assert result == {"batchItemFailures": [{"itemIdentifier": "msg-0"}]}

    def test_one_storage_client_per_batch(self, sqs_event, lambda_context, s3_buckets, s3_put_object) -> None:
        for name in ("a", "b", "c"):
            s3_put_object("pcs.inconnu.app", f"__test/{name}.webp")
        event = sqs_event([single(f"__test/{name}.webp") for name in ("a", "b", "c")])

        with patch("handlers.process_deletion.handler.S3Adapter", wraps=S3Adapter) as adapter:
            result = handler(event, lambda_context)

        assert result == {"batchItemFailures": []}
        assert adapter.call_count == 1
