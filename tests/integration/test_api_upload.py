import json
from collections.abc import Callable
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from app.llm.exceptions import GenerationNetworkError
from app.usage.ledger import UsageLedger

MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _conflict_reply() -> str:
    return "```json\n" + json.dumps({
        "conflicts": [{
            "document1": "policy_a.txt",
            "document2": "policy_b.txt",
            "description": "Maximum item count differs (5 vs 10)",
            "suggestion": "Agree on a single maximum",
        }]
    }) + "\n```"


def _txt(name: str, content: str) -> tuple[str, tuple[str, bytes, str]]:
    return ("documents", (name, content.encode("utf-8"), "text/plain"))


class TestUploadSuccess:
    def test_two_policies_scenario(
        self, client: TestClient, generation_client: MagicMock
    ) -> None:
        generation_client.generate.return_value = _conflict_reply()

        response = client.post(
            "/api/upload",
            files=[
                _txt("policy_a.txt", "Policy A: max 5 items"),
                _txt("policy_b.txt", "Policy B: max 10 items"),
            ],
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Files processed successfully"
        assert len(body["results"]["conflicts"]) == 1
        assert body["results"]["conflicts"][0]["document1"] == "policy_a.txt"

        usage = client.get("/api/usage").json()
        assert usage["totalReportsGenerated"] == 1
        assert usage["totalDocsUploaded"] == 2
        assert usage["totalCost"] == 0.01

    def test_prompt_contains_text_content_verbatim(
        self, client: TestClient, generation_client: MagicMock
    ) -> None:
        generation_client.generate.return_value = '{"conflicts": []}'
        client.post("/api/upload", files=[_txt("a.txt", "Line one\nLine two")])
        prompt = generation_client.generate.call_args.kwargs["prompt"]
        assert "--- Document 1: a.txt ---\nLine one\nLine two\n\n" in prompt
        assert generation_client.generate.call_args.kwargs["model"] == "gemini-1.5-flash"

    def test_mixed_formats_do_not_abort_batch(
        self,
        client: TestClient,
        generation_client: MagicMock,
        sample_pdf_bytes: bytes,
        sample_docx_bytes: bytes,
    ) -> None:
        generation_client.generate.return_value = '{"conflicts": []}'
        response = client.post(
            "/api/upload",
            files=[
                ("documents", ("terms.pdf", sample_pdf_bytes, "application/pdf")),
                ("documents", ("policy.docx", sample_docx_bytes, MIME_DOCX)),
                ("documents", ("broken.docx", b"not a zip", MIME_DOCX)),
                ("documents", ("photo.png", b"\x89PNG", "image/png")),
            ],
        )
        assert response.status_code == 200
        prompt = generation_client.generate.call_args.kwargs["prompt"]
        assert "[PDF Content from terms.pdf - Full text extraction not implemented]" in prompt
        assert "Hello PDF World" not in prompt
        assert "Refunds are accepted within 30 days." in prompt
        assert "Error parsing file broken.docx:" in prompt
        assert "Could not extract text from unsupported file type: photo.png" in prompt

    def test_no_conflicts_counts_no_report(
        self, client: TestClient, generation_client: MagicMock
    ) -> None:
        generation_client.generate.return_value = '{"conflicts": []}'
        response = client.post("/api/upload", files=[_txt("a.txt", "x")])
        assert response.json()["results"] == {"conflicts": []}
        usage = client.get("/api/usage").json()
        assert usage["totalReportsGenerated"] == 0
        assert usage["totalDocsUploaded"] == 1


class TestUploadFailures:
    def test_empty_upload_is_400_without_usage(
        self, client: TestClient, ledger: UsageLedger
    ) -> None:
        response = client.post("/api/upload")
        assert response.status_code == 400
        assert response.json() == {"error": "No documents uploaded."}
        assert ledger.history("anonymous_user") == []

    def test_missing_api_key_is_500_and_recorded(
        self, make_client: Callable[..., TestClient], ledger: UsageLedger
    ) -> None:
        client = make_client(llm_api_key="")
        response = client.post("/api/upload", files=[_txt("a.txt", "x")])
        assert response.status_code == 500
        assert "configuration error" in response.json()["error"]
        [record] = ledger.history("anonymous_user")
        assert record.docs_uploaded == 0
        assert record.reports_generated == 0

    def test_invalid_json_returns_raw_response(
        self, client: TestClient, generation_client: MagicMock, ledger: UsageLedger
    ) -> None:
        raw = "Sorry, I found several issues but cannot format them."
        generation_client.generate.return_value = raw
        response = client.post("/api/upload", files=[_txt("a.txt", "x"), _txt("b.txt", "y")])
        assert response.status_code == 500
        body = response.json()
        assert body["rawResponse"] == raw
        assert "valid JSON" in body["error"]
        [record] = ledger.history("anonymous_user")
        assert record.docs_uploaded == 2
        assert record.reports_generated == 0
        assert record.details["error"] == "invalid JSON"

    def test_upstream_failure_is_500_without_details(
        self, client: TestClient, generation_client: MagicMock, ledger: UsageLedger
    ) -> None:
        generation_client.generate.side_effect = GenerationNetworkError("AI provider API error: 429")
        response = client.post("/api/upload", files=[_txt("a.txt", "x")])
        assert response.status_code == 500
        body = response.json()
        assert set(body) == {"error"}
        assert "429" not in body["error"]
        assert len(ledger.history("anonymous_user")) == 1

    def test_unexpected_failure_is_generic_500(
        self, client: TestClient, generation_client: MagicMock
    ) -> None:
        generation_client.generate.side_effect = RuntimeError("secret internals")
        response = client.post("/api/upload", files=[_txt("a.txt", "x")])
        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to process documents due to a server error."
        }

    def test_non_file_documents_field_is_400_error_body(
        self, client: TestClient, generation_client: MagicMock, ledger: UsageLedger
    ) -> None:
        response = client.post("/api/upload", data={"documents": "not-a-file"})
        assert response.status_code == 400
        assert response.json() == {"error": "No documents uploaded."}
        assert "not-a-file" not in response.text
        generation_client.generate.assert_not_called()
        assert ledger.history("anonymous_user") == []
