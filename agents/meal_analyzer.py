import logging
from typing import Dict, List

from agents.base import OpenAIStyleClient
from agents.prompt_health import MEAL_ANALYSIS_PROMPT, MEAL_ANALYSIS_RESPONSE_FORMAT
from errors import AnalysisError
from llm_config import ANALYSIS_MODEL_NAME, LLM_BASE_URL, UI_TEST_MODE
from models import MealAnalysisResult

logger = logging.getLogger(__name__)


class MealAnalyzerAgent:
    """
    Single-turn structured meal analysis.

    Every call is independent: the prompt carries only the meal description,
    and the reply must be a JSON object matching MealAnalysisResult.
    """

    def __init__(self):
        self.client = OpenAIStyleClient(LLM_BASE_URL, ANALYSIS_MODEL_NAME)

    def build_messages(self, meal_description: str) -> List[Dict[str, str]]:
        return [
            {"role": "user", "content": MEAL_ANALYSIS_PROMPT.format(meal=meal_description)},
        ]

    def analyze(self, meal_description: str) -> MealAnalysisResult:
        """
        Return the parsed analysis, or raise AnalysisError on any failure
        (network, HTTP status, empty reply, malformed or non-conforming JSON).
        """
        if UI_TEST_MODE:
            return MealAnalysisResult(
                summary="[UI test mode] No model was called for this meal.",
                good_for_sugar=["Vegetables"],
                bad_for_sugar=["Added sugar"],
                suggestions=["Swap juice for water."],
            )

        try:
            raw = self.client.chat(
                self.build_messages(meal_description),
                response_format=MEAL_ANALYSIS_RESPONSE_FORMAT,
            )
            result = MealAnalysisResult.model_validate_json(raw.strip())
        except Exception as e:
            logger.exception("Error analyzing meal")
            raise AnalysisError("Failed to get meal analysis from AI.") from e

        logger.info(
            "Meal analyzed: %d good, %d bad, %d suggestions",
            len(result.good_for_sugar),
            len(result.bad_for_sugar),
            len(result.suggestions),
        )
        return result


meal_analyzer_agent = MealAnalyzerAgent()


def analyze_meal(meal_description: str) -> MealAnalysisResult:
    return meal_analyzer_agent.analyze(meal_description)
