"""Build the Gemini Live connect config from relay settings."""

from __future__ import annotations

from google.genai import types

from audio_relay.state.settings import AppSettings


def build_live_config(settings: AppSettings) -> types.LiveConnectConfig:
    activity = settings.activity
    return types.LiveConnectConfig(
        response_modalities=[types.Modality.AUDIO],
        system_instruction=types.Content(parts=[types.Part(text=settings.model.system_prompt)]),
        realtime_input_config=types.RealtimeInputConfig(
            automatic_activity_detection=types.AutomaticActivityDetection(
                disabled=False,
                start_of_speech_sensitivity=types.StartSensitivity(activity.start_sensitivity),
                end_of_speech_sensitivity=types.EndSensitivity(activity.end_sensitivity),
                prefix_padding_ms=activity.prefix_padding_ms,
                silence_duration_ms=activity.silence_duration_ms,
            ),
            # New user speech always cuts the assistant off.
            activity_handling=types.ActivityHandling.START_OF_ACTIVITY_INTERRUPTS,
        ),
    )


__all__ = ["build_live_config"]
