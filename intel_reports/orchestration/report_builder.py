"""
Report builder session: catalog selection, configuration, generation and display.

One ReportBuilder holds the state of one user session. The request lifecycle
(configure -> generating -> done, or back to configure on failure) is driven
only by the generation response; the phase ticker runs beside it and is
stopped whenever the session leaves the generating step.
"""
import asyncio
import logging
from enum import Enum
from typing import Iterable, Optional

from intel_reports.builder.selection import SelectionOutcome
from intel_reports.builder.validator import ConfigurationState, build_generation_request
from intel_reports.catalog.report_types import ReportType, ReportTypeCatalog, get_catalog
from intel_reports.config.settings import ReportSettings, get_settings
from intel_reports.errors import ConfigValidationError, GenerationTransportError
from intel_reports.models.report import GeneratedReport, SearchableEntity, UsageInfo
from intel_reports.notifications.notifier import Notifier
from intel_reports.orchestration.generation_client import (
    FALLBACK_ERROR_MESSAGE,
    GenerationOutcome,
    GenerationServiceClient,
    OutcomeKind,
    interpret_response,
    transport_failure,
)
from intel_reports.orchestration.phase_ticker import GENERATION_PHASES, GenerationPhase, PhaseTicker
from intel_reports.rendering.actions import DocumentActions, HeadlessHost, HostEnvironment
from intel_reports.rendering.document import ReportDocument, build_document
from intel_reports.search.directory_client import DirectoryClient
from intel_reports.search.entity_search import EntityDirectory, EntitySearchProvider

logger = logging.getLogger(__name__)

COMPANY_ALREADY_SELECTED = "Company already selected"
COMPARISON_FULL = "Maximum 5 companies for comparison"


class BuilderStep(str, Enum):
    """Where the session is in the generation lifecycle."""
    CONFIGURE = "configure"
    GENERATING = "generating"
    DONE = "done"


class ReportBuilder:
    """
    State machine for building one report at a time.

    Every generation attempt gets a token. A response is applied only while
    its token is still the latest one, so navigating away, starting over or
    closing the builder turns any in-flight response into a no-op.
    """

    def __init__(self, settings: Optional[ReportSettings] = None,
                 catalog: Optional[ReportTypeCatalog] = None,
                 notifier: Optional[Notifier] = None,
                 generation_client: Optional[GenerationServiceClient] = None,
                 directory: Optional[EntityDirectory] = None,
                 host: Optional[HostEnvironment] = None,
                 phases: Iterable[GenerationPhase] = GENERATION_PHASES):
        self.settings = settings or get_settings()
        self.catalog = catalog or get_catalog()
        self.notifier = notifier or Notifier()
        self.generation_client = generation_client or GenerationServiceClient.from_settings(self.settings)

        directory = directory or DirectoryClient(
            self.settings.directory_service_url,
            timeout_seconds=self.settings.search_timeout_seconds,
        )
        # Single and comparison inputs never share results or pending lookups
        self.company_search = EntitySearchProvider.from_settings(directory, self.settings, name="company-search")
        self.comparison_search = EntitySearchProvider.from_settings(directory, self.settings, name="comparison-search")

        self.ticker = PhaseTicker(phases)
        self.actions = DocumentActions(host or HeadlessHost(self.settings.output_dir), self.notifier, self.settings)

        self.report_type: Optional[ReportType] = None
        self.step = BuilderStep.CONFIGURE
        self.config = ConfigurationState()
        self.report: Optional[GeneratedReport] = None
        self.document: Optional[ReportDocument] = None
        self.usage: Optional[UsageInfo] = None
        self.validation_error: Optional[str] = None

        self._generation = 0

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def progress_percent(self) -> float:
        if self.step == BuilderStep.DONE:
            return 100.0
        if self.step == BuilderStep.GENERATING:
            return self.ticker.percent_complete
        return 0.0

    @property
    def phase_message(self) -> Optional[str]:
        if self.step != BuilderStep.GENERATING:
            return None
        return self.ticker.message

    @property
    def generation_token(self) -> int:
        return self._generation

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def select_report_type(self, report_type_id: str) -> bool:
        """Pick a report type from the catalog. Unknown ids are ignored."""
        report_type = self.catalog.get(report_type_id)
        if report_type is None:
            logger.warning(f"Ignoring unknown report type: {report_type_id}")
            return False
        self._reset()
        self.report_type = report_type
        logger.info(f"Selected report type {report_type.id}")
        return True

    def start_new_report(self):
        """Return to a blank configuration for the same report type."""
        self._reset()

    def back_to_catalog(self):
        """Drop the selected type along with all configuration and results."""
        self._reset()
        self.report_type = None

    def close(self):
        """Tear the session down; nothing scheduled before this may touch state afterwards."""
        self._invalidate()
        self.company_search.reset()
        self.comparison_search.reset()
        logger.debug("Report builder closed")

    def _invalidate(self):
        self._generation += 1
        self.ticker.stop()

    def _reset(self):
        self._invalidate()
        self.step = BuilderStep.CONFIGURE
        self.report = None
        self.document = None
        self.usage = None
        self.validation_error = None
        self.config.clear()
        self.company_search.reset()
        self.comparison_search.reset()

    # ------------------------------------------------------------------
    # Configuration input
    # ------------------------------------------------------------------

    def set_sector(self, sector: str):
        self.config.sector = sector

    def set_topic(self, topic: str):
        self.config.topic = topic

    def select_company(self, entity: Optional[SearchableEntity]):
        self.config.company.select(entity)
        self.company_search.reset()

    def add_company_to_comparison(self, entity: SearchableEntity) -> SelectionOutcome:
        outcome = self.config.companies.add(entity)
        if outcome == SelectionOutcome.FULL:
            self.notifier.warning(COMPARISON_FULL)
        elif outcome == SelectionOutcome.DUPLICATE:
            self.notifier.warning(COMPANY_ALREADY_SELECTED)
        else:
            self.comparison_search.reset()
        return outcome

    def remove_company_from_comparison(self, slug: str) -> bool:
        return self.config.companies.remove(slug)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    async def generate(self) -> bool:
        """
        Validate the configuration and run one generation attempt.

        Returns:
            True when the attempt produced a report that is now displayed.
        """
        if self.report_type is None or self.step != BuilderStep.CONFIGURE:
            logger.debug(f"Ignoring generate in step {self.step.value}")
            return False

        try:
            request = build_generation_request(self.report_type, self.config)
        except ConfigValidationError as e:
            self.validation_error = e.message
            self.notifier.error(e.message)
            return False

        self.validation_error = None
        self._generation += 1
        token = self._generation
        self.step = BuilderStep.GENERATING
        self.ticker.start()

        try:
            response = await self.generation_client.generate(request)
            outcome = interpret_response(response)
        except asyncio.CancelledError:
            if token == self._generation:
                logger.info(f"Generation {token} cancelled")
                self.step = BuilderStep.CONFIGURE
            raise
        except GenerationTransportError as e:
            logger.error(f"Generation transport failure: {e}")
            outcome = transport_failure()
        except Exception as e:
            logger.error(f"Generation failed unexpectedly: {e}")
            outcome = GenerationOutcome(kind=OutcomeKind.REQUEST_ERROR, message=FALLBACK_ERROR_MESSAGE)
        finally:
            if token == self._generation:
                self.ticker.stop()

        if token != self._generation:
            logger.info(f"Discarding response for superseded generation {token}")
            return False

        return self._apply_outcome(outcome)

    def _apply_outcome(self, outcome: GenerationOutcome) -> bool:
        if not outcome.succeeded:
            self.step = BuilderStep.CONFIGURE
            self.notifier.error(outcome.message)
            return False

        self.report = outcome.report
        self.document = build_document(outcome.report)
        self.usage = outcome.usage
        self.step = BuilderStep.DONE
        self.notifier.success(outcome.message)
        if outcome.usage is not None:
            self.notifier.info(outcome.usage.describe())
        logger.info(f"Report ready: {len(self.document.sections)} sections")
        return True

    # ------------------------------------------------------------------
    # Document actions
    # ------------------------------------------------------------------

    def scroll_to_section(self, section_id: str) -> bool:
        if self.document is None:
            return False
        return self.actions.scroll_to_section(self.document, section_id)

    def print_report(self) -> Optional[str]:
        if self.document is None:
            return None
        return self.actions.print_report(self.document)

    def share_report(self) -> bool:
        return self.actions.share()
