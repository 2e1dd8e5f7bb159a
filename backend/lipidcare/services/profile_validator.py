"""Gatekeeping for profile submissions before a generation cycle starts."""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from lipidcare.domain.profile import ProfileSubmission, UserProfile


class ProfileInvalid(ValueError):
    """Raised when a submission cannot start a generation cycle."""


def parse_current_level(raw: Any) -> Optional[float]:
    """Return the current level as a positive float, or None when it is unusable."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def is_submittable(submission: Union[ProfileSubmission, Mapping[str, Any]]) -> bool:
    """True when the submission carries a positive numeric current level.

    Wake and sleep times are deliberately not checked; they are only ever
    interpolated into prompt text.
    """
    try:
        coerced = _coerce(submission)
    except ValidationError:
        return False
    return parse_current_level(coerced.current_level) is not None


def require_submittable(submission: Union[ProfileSubmission, Mapping[str, Any]]) -> UserProfile:
    """Convert a submission into an accepted profile or raise ProfileInvalid."""
    try:
        coerced = _coerce(submission)
    except ValidationError as exc:
        raise ProfileInvalid(f"Profile fields are invalid: {exc.error_count()} error(s)") from exc

    level = parse_current_level(coerced.current_level)
    if level is None:
        raise ProfileInvalid("Current level must be a positive number")

    return UserProfile(
        current_level=level,
        wake_time=coerced.wake_time,
        sleep_time=coerced.sleep_time,
        work_schedule=coerced.work_schedule,
        exercise_level=coerced.exercise_level,
        dietary_preference=coerced.dietary_preference,
    )


def _coerce(submission: Union[ProfileSubmission, Mapping[str, Any]]) -> ProfileSubmission:
    if isinstance(submission, ProfileSubmission):
        return submission
    return ProfileSubmission.model_validate(dict(submission))
