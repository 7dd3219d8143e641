"""
banners/orchestrator.py
-----------------------
One generation round across every configured banner format.

A round:
  - is skipped silently when one is already running or the description is blank
  - clears the previous error and banners, then sets the loading flag
  - dispatches one request per format concurrently (no throttling, no ordering)
  - waits for *all* requests to settle; one failure never cancels the others
  - keeps the successes in format order and reports how many made it

The loading flag is released on every exit path.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from providers.base import ImageProvider, close_provider

from .catalog import (
    BANNER_FORMATS,
    DEFAULT_DESCRIPTION,
    DEFAULT_URL,
    DESIGN_TEMPLATES,
    BannerFormat,
    DesignTemplate,
    find_template,
)
from .composer import GenerationRequest, compose_request

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNKNOWN_ERROR = "An unknown error occurred during generation."


def partial_failure_message(succeeded: int, total: int) -> str:
    return f"Could not generate all banner formats. Only {succeeded} of {total} were successful."


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Banner:
    image_url: str
    aspect_ratio: str
    name: str


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    reason: Exception


GenerationOutcome = Union[Success[Any], Failure]


async def settle_all(aws: Iterable[Awaitable[T]]) -> List[GenerationOutcome]:
    """Run every awaitable concurrently and return one outcome per input, in order.

    An ``Exception`` raised by one awaitable becomes a ``Failure`` and does not
    cancel its siblings. ``KeyboardInterrupt`` and friends still propagate.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    outcomes: List[GenerationOutcome] = []
    for r in results:
        if isinstance(r, Exception):
            outcomes.append(Failure(r))
        elif isinstance(r, BaseException):
            raise r
        else:
            outcomes.append(Success(r))
    return outcomes


# ---------------------------------------------------------------------------
# State + controller
# ---------------------------------------------------------------------------


@dataclass
class BannerFormState:
    product_description: str = DEFAULT_DESCRIPTION
    product_url: str = DEFAULT_URL
    selected_template: DesignTemplate = DESIGN_TEMPLATES[0]
    generated_banners: List[Banner] = field(default_factory=list)
    is_loading: bool = False
    error: Optional[str] = None


class BannerGenerator:
    """Owns the form state and runs generation rounds against one provider.

    Pass either a ready ``provider`` or a ``provider_factory``. A factory is
    called at the start of every round and the provider it returns is closed
    when the round ends, so async SDK clients never outlive the event loop
    they were created on.
    """

    def __init__(
        self,
        provider: Optional[ImageProvider] = None,
        formats: Sequence[BannerFormat] = BANNER_FORMATS,
        templates: Sequence[DesignTemplate] = DESIGN_TEMPLATES,
        state: Optional[BannerFormState] = None,
        provider_factory: Optional[Callable[[], ImageProvider]] = None,
    ) -> None:
        if provider is None and provider_factory is None:
            raise ValueError("BannerGenerator needs a provider or a provider_factory")
        self.provider = provider
        self.provider_factory = provider_factory
        self._formats: Tuple[BannerFormat, ...] = tuple(formats)
        self._templates: Tuple[DesignTemplate, ...] = tuple(templates)
        self._state = state or BannerFormState(selected_template=self._templates[0])

    # -- read accessors ----------------------------------------------------

    @property
    def state(self) -> BannerFormState:
        return self._state

    @property
    def formats(self) -> Tuple[BannerFormat, ...]:
        return self._formats

    @property
    def templates(self) -> Tuple[DesignTemplate, ...]:
        return self._templates

    @property
    def product_description(self) -> str:
        return self._state.product_description

    @property
    def product_url(self) -> str:
        return self._state.product_url

    @property
    def selected_template(self) -> DesignTemplate:
        return self._state.selected_template

    @property
    def generated_banners(self) -> List[Banner]:
        return list(self._state.generated_banners)

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    # -- actions -----------------------------------------------------------

    def update_description(self, text: str) -> None:
        self._state.product_description = text

    def update_url(self, text: str) -> None:
        self._state.product_url = text

    def select_template(self, template: Union[DesignTemplate, str]) -> None:
        if isinstance(template, str):
            template = find_template(template, self._templates)
        self._state.selected_template = template

    async def _generate_one(
        self,
        provider: ImageProvider,
        fmt: BannerFormat,
        request: GenerationRequest,
    ) -> Banner:
        image_url = await provider.generate_banner_image(request.prompt, request.aspect_ratio)
        return Banner(image_url=image_url, aspect_ratio=fmt.aspect_ratio, name=fmt.name)

    async def generate_banners(self) -> None:
        s = self._state
        if s.is_loading or not s.product_description.strip():
            return

        s.is_loading = True
        s.error = None
        s.generated_banners = []

        # Inputs are fixed when the round is accepted; later edits go to the next round.
        requests = [
            compose_request(s.product_description, s.product_url, s.selected_template, fmt)
            for fmt in self._formats
        ]

        provider: Optional[ImageProvider] = None
        try:
            # A factory-built provider lives only as long as this round's event loop.
            provider = self.provider if self.provider_factory is None else self.provider_factory()
            outcomes = await settle_all(
                self._generate_one(provider, fmt, request)
                for fmt, request in zip(self._formats, requests)
            )

            successful: List[Banner] = []
            for fmt, outcome in zip(self._formats, outcomes):
                if isinstance(outcome, Success):
                    successful.append(outcome.value)
                else:
                    logger.error(
                        "Failed to generate a banner (%s, %s): %s",
                        fmt.name,
                        fmt.aspect_ratio,
                        outcome.reason,
                    )

            s.generated_banners = successful

            if len(successful) < len(self._formats):
                s.error = partial_failure_message(len(successful), len(self._formats))
        except Exception as e:
            logger.exception("Banner generation round failed")
            s.error = str(e) or UNKNOWN_ERROR
        finally:
            if self.provider_factory is not None and provider is not None:
                try:
                    await close_provider(provider)
                except Exception:
                    logger.warning("Failed to close image provider %s", provider.name, exc_info=True)
            s.is_loading = False
