import json
from pathlib import Path
from typing import Callable, Union

from pydantic import BaseModel, RootModel, ValidationError


def get_input(
    input_message: str,
    fn_validation: Callable,
    error_message: str = "Invalid input",
) -> int:
    """Prompt for an integer with validation.

    - input_message: prompt shown to the user
    - fn_validation: predicate taking the parsed int and returning True if valid
    - error_message: message displayed on invalid input
    """
    while True:
        try:
            result = int(input(input_message).strip())
            if fn_validation(result):
                return result
        except ValueError:
            pass
        print(error_message)


def get_range_input(input_message: str, min_value: int, max_value: int) -> int:
    """Prompt for an integer in ``[min_value, max_value]``."""
    return get_input(
        input_message=input_message,
        fn_validation=lambda x: min_value <= x <= max_value,
        error_message=f"Invalid input. Enter a number between {min_value} and {max_value}.",
    )


def get_text_input(input_message: str, error_message: str = "Value cannot be empty.") -> str:
    """Prompt until a non-blank line is entered."""
    while True:
        text = input(input_message).strip()
        if text:
            return text
        print(error_message)


def load_and_validate(data_path: Path, model: Union[RootModel, BaseModel]) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
    try:
        return model.model_validate(raw_data)
    except ValidationError as e:
        raise ValueError(f"Validation error for {data_path.name}: {e}")
