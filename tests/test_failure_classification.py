"""Tests for the failure envelope and known error types."""

import pytest

from pokedeck.models.failure import (
    STANDARD_SUGGESTIONS,
    ApiResponse,
    CardLibraryUnavailableError,
    CardNotFoundError,
    EmptyImportError,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    create_known_failure,
    create_success,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)


class TestApiResponse:
    """Response envelope constructors."""

    def test_success(self) -> None:
        response = ApiResponse.success({"text": "Deck: A"})

        assert response.outcome == OutcomeType.SUCCESS
        assert response.data == {"text": "Deck: A"}
        assert response.failure is None

    def test_known_failure(self) -> None:
        response = ApiResponse.known_failure(
            kind=FailureKind.NOT_FOUND,
            message="Missing",
            detail="id x",
        )

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.NOT_FOUND
        assert response.failure.detail == "id x"


class TestKnownErrors:
    """Known error types."""

    def test_empty_import(self) -> None:
        error = EmptyImportError(["No match for 2x Nonexistent Card (ZZZ 999)"])

        assert isinstance(error, KnownError)
        assert error.kind == FailureKind.EMPTY_RESULT
        assert error.status_code == 400
        assert error.message == "No cards imported."
        assert error.detail == "No match for 2x Nonexistent Card (ZZZ 999)"

    def test_empty_import_without_errors(self) -> None:
        assert EmptyImportError([]).detail is None

    def test_empty_import_truncates_detail(self) -> None:
        errors = [f"No match for 1x Card {i} (ZZZ {i})" for i in range(8)]
        error = EmptyImportError(errors)

        assert error.detail is not None
        assert error.detail.endswith("(and 3 more)")
        assert error.errors == errors

    def test_library_unavailable(self) -> None:
        error = CardLibraryUnavailableError(detail="missing file")

        assert error.kind == FailureKind.SERVICE_UNAVAILABLE
        assert error.status_code == 503

    def test_card_not_found(self) -> None:
        error = CardNotFoundError(["a", "b"])

        assert error.status_code == 404
        assert error.detail == "Unknown card ids: a, b"

    def test_to_response(self) -> None:
        response = CardNotFoundError(["a"]).to_response()

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.NOT_FOUND


class TestAuthorityBoundary:
    """Finalization through the response boundary."""

    def test_create_success_is_finalized(self) -> None:
        assert is_finalized(create_success("ok"))

    def test_create_known_failure_fills_suggestion(self) -> None:
        response = create_known_failure(CardNotFoundError(["a"]))

        assert is_finalized(response)
        assert response.failure is not None
        assert response.failure.suggestion == STANDARD_SUGGESTIONS[OutcomeType.KNOWN_FAILURE]

    def test_create_known_failure_keeps_own_suggestion(self) -> None:
        response = create_known_failure(EmptyImportError([]))

        assert response.failure is not None
        assert response.failure.suggestion is not None
        assert "Charizard ex" in response.failure.suggestion

    def test_create_unknown_failure(self) -> None:
        response = create_unknown_failure(RuntimeError("boom"))

        assert is_finalized(response)
        assert response.outcome == OutcomeType.UNKNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.detail == "RuntimeError"

    def test_unfinalized_response(self) -> None:
        assert not is_finalized(ApiResponse.success("raw"))

    def test_rejects_success_with_failure(self) -> None:
        response: ApiResponse[str] = ApiResponse(
            outcome=OutcomeType.SUCCESS,
            failure=FailureDetail(kind=FailureKind.UNKNOWN, message="x"),
        )

        with pytest.raises(ValueError):
            finalize_response(response)

    def test_rejects_failure_without_detail(self) -> None:
        response: ApiResponse[str] = ApiResponse(outcome=OutcomeType.KNOWN_FAILURE)

        with pytest.raises(ValueError):
            finalize_response(response)

    def test_finalized_flag_lives_on_response(self) -> None:
        """Finalizing many responses leaves no trace on fresh ones."""
        for _ in range(50):
            create_known_failure(CardNotFoundError(["a"]))

        assert not is_finalized(ApiResponse.success("fresh"))

    def test_finalized_flag_not_serialized(self) -> None:
        response = create_success({"text": "Deck: A"})

        assert "_finalized" not in response.model_dump()
