"""Unit tests for the FunctionConfiguration payload model."""

import pytest
from pydantic import ValidationError

from lev.models.domain import Environment, FunctionConfiguration
from lev.models.operations import Get, Set, Unset
from tests.fakes import make_response


class TestFunctionConfiguration:
    def test_from_response_reads_declared_fields(self):
        config = FunctionConfiguration.from_response(make_response({"A": "1"}))

        assert config.function_name == "my-function"
        assert config.function_arn.endswith(":function:my-function")
        assert config.revision_id == "rev-1"
        assert config.environment == Environment(variables={"A": "1"})

    def test_from_response_keeps_unknown_fields(self):
        config = FunctionConfiguration.from_response(make_response({"A": "1"}))

        assert config.extra_fields["MemorySize"] == 256
        assert config.extra_fields["Runtime"] == "python3.12"
        assert config.extra_fields["Layers"][0]["Arn"].endswith(":layer:deps:3")
        assert "ResponseMetadata" not in config.extra_fields

    def test_payload_round_trip(self):
        response = make_response({"A": "1"})
        config = FunctionConfiguration.from_response(response)

        expected = {k: v for k, v in response.items() if k != "ResponseMetadata"}
        assert config.model_dump(by_alias=True, exclude_none=True) == expected

    @pytest.mark.parametrize(
        "response",
        [
            make_response(None),
            make_response(None, Environment={}),
            make_response(None, Environment={"Variables": None}),
        ],
    )
    def test_absent_map_is_empty(self, response):
        assert FunctionConfiguration.from_response(response).env_map() == {}

    def test_env_map_is_a_copy(self):
        config = FunctionConfiguration.from_response(make_response({"A": "1"}))
        env = config.env_map()
        env["B"] = "2"
        assert config.env_map() == {"A": "1"}

    def test_with_env_map_replaces_only_environment(self):
        fetched = FunctionConfiguration.from_response(make_response({"A": "1"}))
        updated = fetched.with_env_map({"B": "2"})

        assert updated.env_map() == {"B": "2"}
        assert fetched.env_map() == {"A": "1"}
        assert updated.extra_fields == fetched.extra_fields
        assert updated.revision_id == fetched.revision_id
        assert updated.function_arn == fetched.function_arn

    def test_with_env_map_on_function_without_environment(self):
        fetched = FunctionConfiguration.from_response(make_response(None))
        assert fetched.with_env_map({"A": "1"}).env_map() == {"A": "1"}

    def test_with_env_map_clears_decrypt_error(self):
        fetched = FunctionConfiguration.from_response(
            make_response(None, Environment={"Error": {"ErrorCode": "KMSAccessDeniedException"}})
        )
        assert fetched.environment_error.error_code == "KMSAccessDeniedException"
        assert fetched.with_env_map({}).environment_error is None

    def test_environment_extras_survive(self):
        fetched = FunctionConfiguration.from_response(
            make_response(None, Environment={"Variables": {"A": "1"}, "Future": "x"})
        )
        assert fetched.with_env_map({"B": "2"}).environment.extra_fields == {"Future": "x"}

    def test_is_frozen(self):
        config = FunctionConfiguration.from_response(make_response({"A": "1"}))
        with pytest.raises(ValidationError):
            config.revision_id = "other"

    def test_rejects_non_string_values(self):
        with pytest.raises(ValidationError):
            FunctionConfiguration.from_response(make_response({"A": ["not", "a", "string"]}))


class TestOperations:
    def test_operations_are_hashable_values(self):
        assert Get("fn") == Get("fn")
        assert Set.single("fn", "A", "1") == Set("fn", (("A", "1"),))
        assert Unset.single("fn", "A") == Unset("fn", ("A",))
        assert len({Get("fn"), Get("fn")}) == 1

    def test_operations_are_immutable(self):
        op = Set.single("fn", "A", "1")
        with pytest.raises(AttributeError):
            op.function = "other"
