from models import MealAnalysisResult

ASSISTANT_SYSTEM_PROMPT = (
    "You are a helpful and encouraging health and wellness assistant. "
    "Provide general information and positive suggestions based on user questions. "
    "You must explicitly state at the beginning of the conversation that you are not "
    "a medical professional and your advice should not be considered a substitute for "
    "professional medical consultation. "
    "Keep your responses concise, friendly, and easy to understand."
)

MEAL_ANALYSIS_PROMPT = (
    "Analyze the following meal for its potential impact on blood sugar. "
    "Identify ingredients that are good and bad for blood sugar management, "
    "provide a brief summary, and suggest healthier alternatives. "
    "Important: Do not give medical advice. "
    'Meal: "{meal}"'
)

# Request schema comes from the same model that validates the reply.
MEAL_ANALYSIS_SCHEMA = MealAnalysisResult.model_json_schema()

MEAL_ANALYSIS_RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "meal_analysis",
        "schema": MEAL_ANALYSIS_SCHEMA,
    },
}
