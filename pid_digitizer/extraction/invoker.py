"""Two-tier model invocation: primary model, then fallback on quota exhaustion."""

import json
from pathlib import Path

from pid_digitizer.extraction.client_base import BaseVisionClient
from pid_digitizer.extraction.exceptions import ModelCallError, ModelInvocationError
from pid_digitizer.extraction.prompt_loader import (
    load_analysis_prompt,
    load_json_schema,
    load_system_instruction,
)
from pid_digitizer.extraction.retry import RetryExecutor, RetryPolicy
from pid_digitizer.logging.logger import Log


class ModelInvoker:
    """Sends a diagram image to the vision model and returns the raw response text."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        primary_model: str,
        fallback_model: str | None = None,
        executor: RetryExecutor | None = None,
        temperature: float = 0.0,
        seed: int = 42,
        system_instruction_path: Path | None = None,
        analysis_prompt_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._models = [primary_model]
        if fallback_model:
            self._models.append(fallback_model)
        self._executor = executor or RetryExecutor(RetryPolicy())
        self._temperature = temperature
        self._seed = seed
        self._system_instruction = load_system_instruction(system_instruction_path)
        self._analysis_prompt = load_analysis_prompt(analysis_prompt_path)
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    @property
    def models(self) -> list[str]:
        return list(self._models)

    def invoke(self, image_bytes: bytes, mime_type: str) -> str:
        """Return the model's text output for one image.

        Raises:
            ModelInvocationError: on a permanent error, or once every tier is
                exhausted. The last underlying error is kept as ``cause``.
        """
        policy = self._executor.policy
        last_error: ModelCallError | None = None
        for tier, model in enumerate(self._models):
            try:
                response = self._executor.run(
                    lambda: self._call(model, image_bytes, mime_type),
                    label=f"analysis with model {model}",
                )
            except ModelCallError as exc:
                last_error = exc
                has_fallback = tier < len(self._models) - 1
                if has_fallback and policy.should_fall_back(exc):
                    Log.warning(
                        f"Model {model} quota exhausted, falling back to "
                        f"{self._models[tier + 1]}"
                    )
                    continue
                break
            Log.info(f"Model {model} returned {len(response)} chars")
            return response

        Log.error(f"Model analysis failed after retries and fallback: {last_error}")
        raise ModelInvocationError(
            f"Model analysis failed: {last_error}", cause=last_error
        ) from last_error

    def _call(self, model: str, image_bytes: bytes, mime_type: str) -> str:
        return self._client.generate(
            model=model,
            temperature=self._temperature,
            seed=self._seed,
            system_prompt=self._system_instruction,
            user_prompt=self._analysis_prompt,
            image_bytes=image_bytes,
            mime_type=mime_type,
            json_schema=self._json_schema,
        )
