"""OpenAI-compatible chat client for kid-friendly food narratives."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from calorie_climb.services.feedback import NarrativeClient

SYSTEM_PROMPT = (
    "You are a fun, educational nutrition assistant for kids. Always be "
    "encouraging, use simple language, and make learning about food fun and "
    "engaging. Keep responses to 2-3 sentences maximum."
)

FALLBACK_MESSAGE = "Great choice! Keep exploring different foods!"


@dataclass
class OpenAINarrativeClient(NarrativeClient):
    """Narrative client backed by the chat completions API."""

    client: AsyncOpenAI
    model: str
    max_tokens: int = 150
    temperature: float = 0.7

    @classmethod
    def create(
        cls, api_key: str, model: str, base_url: str | None = None
    ) -> "OpenAINarrativeClient":
        """Create a narrative client; ``base_url`` targets compatible providers."""
        return cls(client=AsyncOpenAI(api_key=api_key, base_url=base_url), model=model)

    async def generate(  # noqa: PLR0913
        self,
        *,
        mode: str,
        current_food: str,
        current_calories: int,
        previous_food: str | None,
        previous_calories: int | None,
        is_healthy: bool,
        reason: str | None = None,
        total_calories: int | None = None,
        foods_eaten: list[str] | None = None,
    ) -> str:
        """Ask the model for feedback or a game-over summary."""
        if mode == "gameOver":
            prompt = build_game_over_prompt(reason or "", total_calories or 0, foods_eaten)
        else:
            prompt = build_feedback_prompt(
                current_food,
                current_calories,
                previous_food,
                previous_calories,
                is_healthy,
            )

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        if not response.choices:
            return FALLBACK_MESSAGE
        content = response.choices[0].message.content
        return content.strip() if content else FALLBACK_MESSAGE


def build_feedback_prompt(
    current_food: str,
    current_calories: int,
    previous_food: str | None,
    previous_calories: int | None,
    is_healthy: bool,
) -> str:
    prompt = (
        f'A kid just chose to eat "{current_food}" which has '
        f"{current_calories} calories. "
    )
    if previous_food and previous_calories is not None:
        prompt += (
            f'Before this, they ate "{previous_food}" which had '
            f"{previous_calories} calories. "
        )
        if current_calories > previous_calories:
            prompt += "The new food has more calories, so the game continues! "

    if is_healthy:
        prompt += "This is a healthy choice! "
    else:
        prompt += "This isn't the healthiest option, but it's okay sometimes! "

    return prompt + (
        "Give a fun, encouraging response about this food choice that teaches "
        "kids about nutrition. Keep it simple and positive!"
    )


def build_game_over_prompt(
    reason: str, total_calories: int, foods_eaten: list[str] | None
) -> str:
    eaten = ", ".join(foods_eaten or [])
    return (
        f"A kid's nutrition game just ended. {reason} They ate {total_calories} "
        f"total calories from these foods: {eaten}. Give a fun, educational "
        "message about what happened and encourage them to try again with "
        "healthier choices. Keep it positive and kid-friendly, 2-3 sentences max."
    )
