from bravesearch.utils.redaction import SecretRedactor


def test_redacts_literal_secret() -> None:
    redactor = SecretRedactor(["my-very-secret-value"])
    redacted = redactor.redact("key my-very-secret-value leaked twice: my-very-secret-value")
    assert "my-very-secret-value" not in redacted
    assert redacted.count(SecretRedactor.SECRET_PLACEHOLDER) == 2


def test_redacts_subscription_token_header() -> None:
    redactor = SecretRedactor()
    redacted = redactor.redact("headers={'X-Subscription-Token': 'abc123456'}")
    assert "abc123456" not in redacted
    assert SecretRedactor.SECRET_PLACEHOLDER in redacted


def test_short_values_are_not_treated_as_secrets() -> None:
    redactor = SecretRedactor(["abc"])
    assert redactor.redact("abc def") == "abc def"


def test_disabled_redactor_is_passthrough() -> None:
    redactor = SecretRedactor(["my-very-secret-value"], enabled=False)
    assert redactor.redact("my-very-secret-value") == "my-very-secret-value"


def test_patch_record_rewrites_message() -> None:
    redactor = SecretRedactor(["my-very-secret-value"])
    record = {"message": "token=my-very-secret-value"}
    redactor.patch_record(record)
    assert "my-very-secret-value" not in record["message"]
