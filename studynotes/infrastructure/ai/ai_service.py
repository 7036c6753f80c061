"""Cliente LLM de alto nivel: completions en modo JSON (modelo primario → fallback)."""
import json
import logging
from typing import Any, Dict, Optional

from openai import BadRequestError, OpenAIError

from studynotes.core.exceptions import AIUnavailableError, GenerationError

_log = logging.getLogger("studynotes.ai")


class AIService:
    """Envoltorio sobre el cliente de OpenAI.

    `client` es None cuando no hay API key; en ese caso cualquier llamada
    lanza `AIUnavailableError`. Cualquier otro objeto con
    `chat.completions.create` sirve (útil en tests).
    """

    def __init__(self, client: Optional[Any], model_primary: str, model_fallback: str) -> None:
        self.client = client
        self.model_primary = model_primary
        self.model_fallback = model_fallback

    @property
    def configured(self) -> bool:
        return self.client is not None

    def _create(self, model: str, prompt: str) -> str:
        resp = self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            response_format={"type": "json_object"},
        )
        if not resp.choices:
            raise GenerationError()
        return resp.choices[0].message.content or ""

    def complete_json(self, prompt: str) -> Dict[str, Any]:
        """
        Estrategia:
          1) OpenAI (modelo primario)
          2) OpenAI (fallback) si el primario rechaza la petición
        El contenido se parsea como JSON; vacío equivale a `{}`.
        """
        if not self.configured:
            raise AIUnavailableError()
        try:
            try:
                raw = self._create(self.model_primary, prompt)
            except BadRequestError:
                if self.model_fallback == self.model_primary:
                    raise
                _log.warning("Modelo %s rechazó la petición; usando %s", self.model_primary, self.model_fallback)
                raw = self._create(self.model_fallback, prompt)
        except OpenAIError as e:
            raise GenerationError() from e

        try:
            data = json.loads(raw or "{}")
        except ValueError as e:
            raise GenerationError() from e
        if not isinstance(data, dict):
            raise GenerationError()
        return data
