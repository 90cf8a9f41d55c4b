"""OpenAI chat model.

:class:`ChatModel` implements the ``Model`` protocol on top of
:class:`ChatService`. It owns client-level call options and default model
options; each ``generate`` call merges its own overrides on top, validates
the result, and returns a :class:`Generation`:

- buffered: one message per choice, materialized immediately;
- streamed (``with_stream()``): a lazy generation projecting every SSE delta
  into a message fragment and notifying message handlers as it goes.

Message handlers only observe streamed fragments; a buffered call never
invokes them.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

import httpx

from ..base.cancellation import CancellationToken
from ..base.errors import ErrorCode, ProviderError
from ..base.logging import LogContext, get_logger
from ..base.models import Generation, ImageContent, Message, TextContent
from ..base.options import MessageHandler, ModelOption, ModelOptions, merge_options, validate_options
from ..base.pipeline import Executor
from ..base.streaming import notify_message_handlers
from ..config.defaults import OPENAI_PROVIDER_NAME
from .call_options import (
    CallOption,
    with_api_key,
    with_base_url,
    with_executor,
    with_organization,
    with_project,
)
from .chat import ChatService
from .chat_types import (
    ChatCompletionChunk,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessageParam,
    ContentPartParam,
    ImagePartParam,
    ImageURL,
    TextPartParam,
)
from .roles import to_model_role, to_openai_role

_logger = get_logger("fayth.openai.model")

NO_CONTENT_ERROR = "no content in generation response"


def to_message_param(msg: Message) -> ChatMessageParam:
    """Convert a :class:`Message` into its request form.

    A message holding exactly one text part is sent as a plain string;
    anything else becomes a list of text and ``image_url`` parts.
    """
    role = to_openai_role(msg.role)
    if len(msg.contents) == 1 and isinstance(msg.contents[0], TextContent):
        return ChatMessageParam(role=role, content=msg.contents[0].text)
    parts: List[ContentPartParam] = []
    for part in msg.contents:
        if isinstance(part, TextContent):
            parts.append(TextPartParam(text=part.text))
        elif isinstance(part, ImageContent):
            parts.append(ImagePartParam(image_url=ImageURL(url=part.data_url())))
    return ChatMessageParam(role=role, content=parts)


def build_request(messages: Sequence[Message], opts: ModelOptions) -> ChatCompletionRequest:
    """Combine converted messages with the wire form of ``opts``."""
    return ChatCompletionRequest(
        messages=[to_message_param(m) for m in messages],
        **opts.to_wire(),
    )


def response_to_messages(resp: ChatCompletionResponse) -> List[Message]:
    """Convert every choice of a buffered response into a :class:`Message`.

    Raises:
        ProviderError: ``DECODE`` when the response has no choices.
    """
    if not resp.choices:
        raise ProviderError(
            code=ErrorCode.DECODE,
            message=NO_CONTENT_ERROR,
            provider=OPENAI_PROVIDER_NAME,
            model=resp.model or None,
        )
    properties: Dict[str, Any] = {}
    if resp.usage is not None:
        properties["usage"] = resp.usage.model_dump()
    out: List[Message] = []
    for choice in resp.choices:
        metadata = {
            k: v
            for k, v in (
                ("finish_reason", choice.finish_reason),
                ("response_id", resp.id),
                ("model", resp.model),
            )
            if v
        }
        contents = [TextContent(choice.message.content)] if choice.message.content else []
        out.append(
            Message(
                role=to_model_role(choice.message.role),
                contents=contents,
                metadata=metadata,
                properties=dict(properties),
                index=choice.index,
            )
        )
    return out


def project_chunks(
    chunks: Iterable[ChatCompletionChunk],
    handlers: Sequence[MessageHandler] = (),
    ctx: Optional[LogContext] = None,
) -> Iterator[Message]:
    """Lazily project stream chunks into message fragments.

    Each choice delta with non-empty content becomes one message (role from
    the delta, assistant by default) tagged with its choice index. Handlers
    are notified per fragment, before it is yielded.
    """
    try:
        for chunk in chunks:
            for choice in chunk.choices:
                content = choice.delta.content
                if not content:
                    continue
                metadata: Dict[str, str] = {}
                if choice.finish_reason:
                    metadata["finish_reason"] = choice.finish_reason
                if chunk.id:
                    metadata["response_id"] = chunk.id
                msg = Message(
                    role=to_model_role(choice.delta.role),
                    contents=[TextContent(content)],
                    metadata=metadata,
                    index=choice.index,
                )
                notify_message_handlers(handlers, msg, _logger, ctx)
                yield msg
    finally:
        close = getattr(chunks, "close", None)
        if close is not None:
            close()


class ChatModel:
    """Chat completions model.

    Parameters:
        api_key: Bearer token. Required before the first request.
        model: Default model identifier.
        base_url: Service base URL; defaults to the public API.
        organization: Optional organization scope.
        project: Optional project scope.
        executor: Terminal executor override (tests, custom clients).
        call_options: Extra client-level call options, applied after the
            ones derived from the keyword arguments.
        model_options: Default model options applied on top of ``model``.
    """

    def __init__(
        self,
        *,
        api_key: str = "",
        model: str = "",
        base_url: Optional[httpx.URL | str] = None,
        organization: str = "",
        project: str = "",
        executor: Optional[Executor] = None,
        call_options: Iterable[CallOption] = (),
        model_options: Iterable[ModelOption] = (),
    ) -> None:
        client_options: List[CallOption] = []
        if api_key:
            client_options.append(with_api_key(api_key))
        if base_url is not None:
            client_options.append(with_base_url(base_url))
        if organization:
            client_options.append(with_organization(organization))
        if project:
            client_options.append(with_project(project))
        if executor is not None:
            client_options.append(with_executor(executor))
        client_options.extend(call_options)
        self.service = ChatService(*client_options)
        self.defaults = merge_options(ModelOptions(model=model), *model_options)

    @property
    def model(self) -> str:
        return self.defaults.model

    def generate(
        self,
        messages: Sequence[Message],
        *options: ModelOption,
        token: Optional[CancellationToken] = None,
    ) -> Generation:
        """Run one completion for ``messages``.

        Raises:
            ProviderError: ``VALIDATION`` for an empty message list or invalid
                options (nothing is sent), plus any transport error from
                :meth:`ChatService.completion`.
        """
        if not messages:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message="empty message list",
                provider=OPENAI_PROVIDER_NAME,
                model=self.model or None,
            )
        opts = merge_options(self.defaults, *options)
        validate_options(opts)
        response = self.service.completion(build_request(messages, opts), token=token)
        if response.chunks is not None:
            ctx = LogContext(provider=OPENAI_PROVIDER_NAME, model=opts.model)
            return Generation.from_stream(
                project_chunks(response.chunks, opts.message_handlers, ctx),
                on_close=response.close,
            )
        return Generation(response_to_messages(response.completion))


__all__ = [
    "ChatModel",
    "NO_CONTENT_ERROR",
    "build_request",
    "project_chunks",
    "response_to_messages",
    "to_message_param",
]
