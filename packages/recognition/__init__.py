# Recognition package - speech and sign recognition sessions
"""
Single-flight recognition sessions over pluggable models.

Example usage:
    import numpy as np
    from packages.recognition import SignRecognitionSession

    session = SignRecognitionSession(rng=np.random.default_rng(7))
    frame = session.extract_keypoints(camera_frame)
    results = await session.start(frame)
    if results:
        print(results[0].label, results[0].percent)
"""

from .keypoints import (
    FACE_POINTS,
    FEATURE_SIZE,
    HAND_POINTS,
    POSE_POINTS,
    KeypointFrame,
    PlaceholderPerception,
)
from .models import (
    SIGN_LABELS,
    SPEECH_CANDIDATES,
    PlaceholderSignModel,
    PlaceholderSpeechModel,
    uniform_delay,
)
from .session import (
    SIGN_DELAY_MAX_MS,
    SIGN_DELAY_MIN_MS,
    SPEECH_DELAY_MS,
    RecognitionSession,
    SignRecognitionSession,
    SpeechRecognitionSession,
)

__all__ = [
    # Sessions
    "RecognitionSession",
    "SpeechRecognitionSession",
    "SignRecognitionSession",
    "SPEECH_DELAY_MS",
    "SIGN_DELAY_MIN_MS",
    "SIGN_DELAY_MAX_MS",
    # Models
    "PlaceholderSpeechModel",
    "PlaceholderSignModel",
    "SPEECH_CANDIDATES",
    "SIGN_LABELS",
    "uniform_delay",
    # Keypoints
    "KeypointFrame",
    "PlaceholderPerception",
    "HAND_POINTS",
    "POSE_POINTS",
    "FACE_POINTS",
    "FEATURE_SIZE",
]
