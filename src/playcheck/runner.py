from __future__ import annotations

import logging
import runpy
from dataclasses import dataclass

import typer

from playcheck.config import PageConfig, PlaybookConfig, PresentationMode


@dataclass
class PageOutcome:
    name: str
    path: str
    error: str | None = None

    @property
    def crashed(self) -> bool:
        return self.error is not None


class PageRunner:
    """Runs playbook pages one after another in the current process."""

    def __init__(
        self,
        config: PlaybookConfig,
        mode: PresentationMode = PresentationMode.SOLVED,
        page_filter: str | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config
        self.mode = mode
        self.page_filter = page_filter
        self.logger = logger or logging.getLogger(__name__)

    def selected_pages(self) -> list[PageConfig]:
        if self.page_filter:
            page = self.config.page(self.page_filter)
            page.source(self.mode)
            return [page]
        if self.mode == PresentationMode.EXERCISE:
            return [p for p in self.config.pages if p.exercise is not None]
        return list(self.config.pages)

    def execute(self) -> list[PageOutcome]:
        """Run every selected page. Returns one outcome per page."""
        pages = self.selected_pages()
        self.logger.debug(
            f"Running {len(pages)} page(s) from '{self.config.title}' in {self.mode.value} mode"
        )

        outcomes = []
        for page in pages:
            outcomes.append(self._run_page(page))
        return outcomes

    def _run_page(self, page: PageConfig) -> PageOutcome:
        path = page.source(self.mode)
        typer.echo(f"== {page.name} ({self.mode.value})")
        self.logger.debug(f"Running page {page.name}: {path}")

        if not path.exists():
            self.logger.warning(f"Page file {path} not found")
            return PageOutcome(name=page.name, path=str(path), error=f"{path} not found")

        try:
            # Fresh globals per page; checks inside print their own lines.
            runpy.run_path(str(path), run_name="__main__")
        except (Exception, SystemExit) as e:
            # sys.exit() in a page ends that page only
            self.logger.debug(f"Page {page.name} raised", exc_info=True)
            return PageOutcome(
                name=page.name,
                path=str(path),
                error=f"{type(e).__name__}: {e}",
            )

        self.logger.debug(f"Page {page.name} finished")
        return PageOutcome(name=page.name, path=str(path))
