import base64

import httpx
import openai

from pid_digitizer.extraction.client_base import BaseVisionClient
from pid_digitizer.extraction.exceptions import (
    ModelCallError,
    ModelNetworkError,
    ModelQuotaExceededError,
    ModelResponseError,
    ModelUnavailableError,
)

_SERVICE_UNAVAILABLE = 503


def wrap_array_schema(json_schema: dict[str, object]) -> dict[str, object]:
    """Wrap an array schema in an object envelope.

    Structured output requires an object at the root, so the component array
    travels as {"components": [...]}.
    """
    return {
        "type": "object",
        "properties": {"components": json_schema},
        "required": ["components"],
    }


class OpenAIVisionClientAdapter(BaseVisionClient):
    """Vision client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def generate(
        self,
        *,
        model: str,
        temperature: float,
        seed: int,
        system_prompt: str,
        user_prompt: str,
        image_bytes: bytes,
        mime_type: str,
        json_schema: dict[str, object],
    ) -> str:
        image_b64 = base64.b64encode(image_bytes).decode("ascii")
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                seed=seed,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "component_inventory",
                        "strict": False,
                        "schema": wrap_array_schema(json_schema),
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "image_url",
                                "image_url": {"url": f"data:{mime_type};base64,{image_b64}"},
                            },
                            {"type": "text", "text": user_prompt},
                        ],
                    },
                ],
            )
        except openai.RateLimitError as exc:
            raise ModelQuotaExceededError(f"Model {model} rate limited (429): {exc}") from exc
        except openai.APIStatusError as exc:
            if exc.status_code == _SERVICE_UNAVAILABLE:
                raise ModelUnavailableError(
                    f"Model {model} unavailable (503): {exc}"
                ) from exc
            raise ModelCallError(
                f"Model {model} API error ({exc.status_code}): {exc}"
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelNetworkError(f"Model {model} network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelCallError(f"Model {model} API error: {exc}") from exc

        if not response.choices:
            raise ModelResponseError("Model returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ModelResponseError("Model returned empty response")
        return content
