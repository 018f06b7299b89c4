from abc import ABC, abstractmethod


class BaseVisionClient(ABC):
    """Contract for provider-specific vision model clients."""

    @abstractmethod
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
        """Send one image plus instructions and return the response text.

        Raises:
            ModelCallError: or one of its subclasses on any provider failure.
        """
