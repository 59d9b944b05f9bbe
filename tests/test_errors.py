import pickle

from checkout_buttons.errors import InvalidArgumentError, MissingDataError, MissingDataErrorType


def test_missing_data_errors_compare_and_hash_by_subtype():
    cart = MissingDataError(MissingDataErrorType.MISSING_CART)

    assert cart == MissingDataError(MissingDataErrorType.MISSING_CART)
    assert cart != MissingDataError(MissingDataErrorType.MISSING_CHECKOUT)
    assert len({cart, MissingDataError(MissingDataErrorType.MISSING_CART)}) == 1


def test_missing_data_error_survives_pickling():
    error = MissingDataError(MissingDataErrorType.MISSING_CLIENT_TOKEN)

    restored = pickle.loads(pickle.dumps(error))

    assert restored == error
    assert restored.subtype is MissingDataErrorType.MISSING_CLIENT_TOKEN
    assert str(restored) == error.message


def test_missing_data_error_message_names_the_missing_piece():
    assert "cart" in str(MissingDataError(MissingDataErrorType.MISSING_CART))


def test_invalid_argument_error_is_a_value_error_with_payload():
    error = InvalidArgumentError("bad payload", payload={"id": "1"})

    assert isinstance(error, ValueError)
    assert error.payload == {"id": "1"}
    assert InvalidArgumentError().payload == {}
