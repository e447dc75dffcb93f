"""
Prompts API service.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.context import RequestContext
from ..schemas.common import CreateOptions
from ..schemas.pagination import PromptListOptions
from ..schemas.prompt_models import (
    Prompt,
    PromptCreate,
    PromptGetArgs,
    PromptResult,
    PromptUpdate,
)
from ..schemas.response import Response
from ..utils.url_utils import add_options, escape_path_segment
from .base import BaseService, state_path


logger = logging.getLogger(__name__)


PromptID = str | int


class PromptsService(BaseService):
    """CRUD, toggling and rendering for prompts.

    Prompt IDs may be given as strings or integers; both are placed in the
    path as their decimal/string form.
    """

    def list(
        self,
        ctx: RequestContext | None,
        opts: PromptListOptions | None = None,
    ) -> tuple[list[Prompt], Response]:
        """List prompts. The endpoint returns a bare array."""
        return self._get_array(ctx, add_options("prompts", opts), Prompt)

    def get(
        self,
        ctx: RequestContext | None,
        prompt_id: PromptID,
        args: PromptGetArgs | dict[str, str] | None = None,
    ) -> tuple[PromptResult | None, Response]:
        """
        Render a prompt with template arguments.

        Args:
            ctx: Request context
            prompt_id: Prompt ID or name
            args: Template arguments

        Returns:
            Tuple of (rendered prompt, response)
        """
        if isinstance(args, dict):
            args = PromptGetArgs(args=args)
        body = args if args is not None else PromptGetArgs()
        return self._send(
            ctx,
            "POST",
            f"prompts/{escape_path_segment(prompt_id)}",
            body=body,
            dest=PromptResult,
        )

    def create(
        self,
        ctx: RequestContext | None,
        prompt: PromptCreate,
        opts: CreateOptions | None = None,
    ) -> tuple[Prompt | None, Response]:
        logger.info(f"Creating prompt: {prompt.name}")
        body = self._create_body("prompt", prompt, opts)
        return self._send(ctx, "POST", "prompts", body=body, dest=Prompt)

    def update(
        self,
        ctx: RequestContext | None,
        prompt_id: PromptID,
        prompt: PromptUpdate,
    ) -> tuple[Prompt | None, Response]:
        logger.info(f"Updating prompt: {prompt_id}")
        return self._send(
            ctx,
            "PUT",
            f"prompts/{escape_path_segment(prompt_id)}",
            body=prompt,
            dest=Prompt,
        )

    def delete(
        self,
        ctx: RequestContext | None,
        prompt_id: PromptID,
    ) -> Response:
        logger.info(f"Deleting prompt: {prompt_id}")
        _, response = self._send(ctx, "DELETE", f"prompts/{escape_path_segment(prompt_id)}")
        return response

    def toggle(
        self,
        ctx: RequestContext | None,
        prompt_id: PromptID,
        activate: bool,
    ) -> tuple[Prompt | None, Response]:
        """Activate or deactivate a prompt; None if the reply omits it."""
        logger.info(f"Setting prompt {prompt_id} active={activate}")
        result, response = self._send(
            ctx,
            "POST",
            state_path("prompts", prompt_id, "toggle", activate),
            dest=dict[str, Any],
        )
        prompt_data = (result or {}).get("prompt")
        if prompt_data is None:
            return None, response
        return self._decode_nested(prompt_data, Prompt), response
