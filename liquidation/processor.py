"""
Liquidation Processor - Main Orchestrator

Coordinates the liquidation pipeline through discrete, testable steps and
renders the resulting decree.
"""

import json
import logging
from typing import Any, Dict

from . import config
from .calculators import (
    CompensationCalculator,
    TotalsCalculator,
    get_surcharge_policy,
)
from .errors import TemplateError
from .models import CaseRecord, DecreeDocument, LiquidationContext, LiquidationResult
from .motivations import MotivationGenerator
from .output import OutputBuilder
from .placeholders import PlaceholderBuilder
from .rendering import RENDERERS, renderer_for
from .schedule import INTERIM_SCHEDULE, PRINCIPAL_SCHEDULE
from .templates import TemplateLoader
from .validators import InputValidator

logger = logging.getLogger(__name__)


class LiquidationProcessor:
    """
    Main orchestrator for a fee liquidation.

    Implements a clear pipeline pattern:
    1. Validate Input
    2. Build Context
    3. Principal Compensation
    4. Interim Compensation
    5. Multi-Party Surcharge
    6. Aggregate Totals
    7. Motivations
    8. Placeholder Map
    9. Build Output
    """

    def __init__(self, default_policy: str | None = None, template_loader: TemplateLoader | None = None):
        self.default_policy = default_policy or config.SURCHARGE_POLICY
        self.validator = InputValidator()
        self.principal_calculator = CompensationCalculator(PRINCIPAL_SCHEDULE)
        self.interim_calculator = CompensationCalculator(INTERIM_SCHEDULE)
        self.totals_calculator = TotalsCalculator()
        self.motivation_generator = MotivationGenerator()
        self.placeholder_builder = PlaceholderBuilder()
        self.output_builder = OutputBuilder()
        self.template_loader = template_loader or TemplateLoader()

    def run(self, case: CaseRecord) -> LiquidationContext:
        """Run every calculation step and return the populated context."""
        # Step 1: Validate
        self.validator.validate(case)

        # Step 2: Build initial context
        ctx = LiquidationContext(case=case, surcharge_policy=case.surcharge_policy or self.default_policy)
        policy = get_surcharge_policy(ctx.surcharge_policy)

        # Step 3: Principal proceeding
        ctx.principal = self.principal_calculator.calculate(case.tier, case.phases)

        # Step 4: Interim sub-proceeding, only when activated
        if case.has_interim:
            ctx.interim = self.interim_calculator.calculate(case.interim_tier, case.interim_phases)

        # Step 5: Multi-party surcharge
        ctx.surcharge = policy.calculate(case.extra_party_count)

        # Step 6: Totals
        ctx.totals = self.totals_calculator.calculate(ctx.principal, ctx.interim, ctx.surcharge.rate)

        # Step 7: Motivations
        ctx.motivations = self.motivation_generator.resolve(case, ctx.interim, policy)

        # Step 8: Placeholder map
        ctx.placeholders = self.placeholder_builder.build(ctx)

        return ctx

    def process(self, case: CaseRecord) -> LiquidationResult:
        """
        Process a case record through the complete pipeline.

        Args:
            case: CaseRecord built by the caller

        Returns:
            LiquidationResult with all calculations, motivations and document fields
        """
        ctx = self.run(case)

        # Step 9: Build output
        return self.output_builder.build(ctx)

    def process_from_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Process a case from raw dictionary input.

        Convenience method for API usage.
        """
        case = CaseRecord.from_dict(data)
        result = self.process(case)
        return self._result_to_dict(result)

    def render_decree(self, case: CaseRecord, skeleton: bytes, kind: str = "text") -> DecreeDocument:
        """Render a decree from an already fetched skeleton."""
        return self._render(self.run(case), skeleton, kind)

    def generate_decree(
        self,
        case: CaseRecord,
        template_location: str | None = None,
        output_format: str | None = None,
    ) -> DecreeDocument:
        """
        Fetch the skeleton and render the decree.

        output_format "json" skips the skeleton entirely and returns the
        serialised case record with every computed field.
        """
        if output_format == "json":
            result = self.process(case)
            return DecreeDocument(
                content=json.dumps(self._result_to_dict(result), indent=2, ensure_ascii=False).encode("utf-8"),
                media_type="application/json",
                filename=self._filename(case, "json"),
            )

        location = template_location or config.DECREE_TEMPLATE
        if output_format is None:
            kind = "docx" if renderer_for(location) is RENDERERS["docx"] else "text"
        else:
            kind = output_format
        if kind not in RENDERERS:
            raise ValueError(f"Invalid format: {kind}. Must be one of 'docx', 'text', 'json'")

        # Compute first so invalid input never triggers a template fetch
        ctx = self.run(case)
        try:
            skeleton = self.template_loader.load(location)
            return self._render(ctx, skeleton, kind)
        except TemplateError as e:
            logger.error(f"Decree rendering failed for {case.rg_dib or 'unnumbered case'}: {e}")
            raise

    def _render(self, ctx: LiquidationContext, skeleton: bytes, kind: str) -> DecreeDocument:
        renderer = RENDERERS[kind]
        return DecreeDocument(
            content=renderer.render(skeleton, ctx.placeholders),
            media_type=renderer.media_type,
            filename=self._filename(ctx.case, renderer.extension),
        )

    def _filename(self, case: CaseRecord, extension: str) -> str:
        number = (case.rg_dib or "").replace("/", "-").strip() or "decreto"
        return f"liquidazione_{number}.{extension}"

    def _result_to_dict(self, result: LiquidationResult) -> Dict[str, Any]:
        """Convert LiquidationResult to dictionary for API response."""
        return {
            "case_summary": result.case_summary,
            "calculations": result.calculations,
            "motivations": result.motivations,
            "document_fields": result.document_fields,
            "case": result.case,
        }


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def process_case_from_dict(input_data: Dict[str, Any]) -> Dict[str, Any]:
    """Process a case from Python dict and return Python dict."""
    processor = LiquidationProcessor()
    return processor.process_from_dict(input_data)


def process_case_from_json(json_input: str) -> str:
    """
    Process a case from JSON string input and return JSON string output.
    """
    try:
        input_data = json.loads(json_input)
        result = process_case_from_dict(input_data)
        return json.dumps(result, indent=2, ensure_ascii=False)

    except ValueError as e:
        error_response = {"error": str(e), "status": "validation_failed"}
        return json.dumps(error_response, indent=2)

    except Exception as e:
        error_response = {"error": str(e), "status": "failed"}
        return json.dumps(error_response, indent=2)
