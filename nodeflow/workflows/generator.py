#!/usr/bin/env python3
"""
Client for the workflow generation service.

The service turns a text prompt into a candidate graph. Its reply is
validated here so malformed output never reaches the engine.
"""
import time
import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from nodeflow.utils.config import GeneratorConfig
from nodeflow.workflows.schema import GeneratedWorkflow, GenerateResponse

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}
MAX_BACKOFF_SEC = 30


class GeneratorError(RuntimeError):
    """Raised when the generation service fails or returns an invalid graph"""
    pass


def backoff_sleep(attempt: int) -> None:
    delay = min(2 ** attempt, MAX_BACKOFF_SEC)
    time.sleep(delay)


class WorkflowGenerator:
    """Requests candidate workflows from the generation service"""

    def __init__(self, config: GeneratorConfig, session: Optional[requests.Session] = None):
        if not config.url:
            raise GeneratorError("Generator URL is not configured")
        self.config = config
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = dict(HEADERS)
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    def _post(self, payload: Dict[str, Any]) -> requests.Response:
        url = self.config.url
        max_retries = self.config.max_retries
        attempt = 0
        while True:
            try:
                r = self.session.post(url, headers=self._headers(), json=payload, timeout=self.config.timeout)
            except requests.RequestException as e:
                # Network error: retry as a transient failure
                if attempt >= max_retries:
                    raise GeneratorError(f"Generator request failed: {e}") from e
                attempt += 1
                logger.warning("POST error %s; retrying (%d/%d) ...", e, attempt, max_retries)
                backoff_sleep(attempt)
                continue

            # 429 Too Many Requests: honor Retry-After if present
            if r.status_code == 429 and attempt < max_retries:
                attempt += 1
                retry_after = r.headers.get("retry-after")
                if retry_after and retry_after.isdigit():
                    time.sleep(int(retry_after))
                else:
                    backoff_sleep(attempt)
                continue

            # Retry on 5xx transient server errors
            if 500 <= r.status_code < 600 and attempt < max_retries:
                attempt += 1
                logger.warning("POST %s -> %d; retrying (%d/%d) ...", url, r.status_code, attempt, max_retries)
                backoff_sleep(attempt)
                continue

            return r

    def generate(self, prompt: str) -> GeneratedWorkflow:
        """
        Generate a candidate workflow for ``prompt``.

        Returns:
            The validated candidate graph with its metadata

        Raises:
            GeneratorError: On transport failure, error status, or invalid output
        """
        if not prompt or not prompt.strip():
            raise GeneratorError("Prompt is required")

        logger.info("Requesting workflow for prompt: %s", prompt)
        r = self._post({"prompt": prompt})
        if not r.ok:
            raise GeneratorError(f"Generator returned HTTP {r.status_code}: {r.text[:200]}")

        try:
            body = r.json()
        except ValueError as e:
            raise GeneratorError("Generator returned a non-JSON response") from e

        try:
            response = GenerateResponse.model_validate(body)
        except ValidationError as e:
            raise GeneratorError(f"Generator returned an invalid workflow: {e}") from e

        workflow = response.workflow
        logger.info("Generated workflow: %d nodes, %d edges", len(workflow.nodes), len(workflow.edges))
        return workflow
