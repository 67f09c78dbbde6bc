# =============================================================================
# main.py  —  Interactive FRED Data Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
#   Needs FRED_API_KEY (for the server) and OPENROUTER_API_KEY (for the
#   default model), either exported or in a .env file.
#
# WHAT HAPPENS:
#   1. The ADK agent is created; it will spawn the FRED MCP server on stdio
#   2. A session is opened for this console conversation
#   3. Each question is streamed through the agent; tool calls ("search",
#      "series") are printed as they happen
#   4. The agent's final answer is printed
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Before the agent import: LiteLlm reads its API key when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from fred_agent.fred_agent import create_agent

APP_NAME = "fred_assistant"
USER_ID = "console_user"
_EXIT_WORDS = ("quit", "exit", "q")


async def ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question through the agent and return its final text."""
    message = types.Content(role="user", parts=[types.Part(text=question)])
    final_response = ""

    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=message,
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if getattr(part, "function_call", None):
                args = dict(part.function_call.args or {})
                print(f"  🔧 {part.function_call.name}({args})")
            if getattr(part, "text", None):
                final_response = part.text

    return final_response


async def run_agent() -> None:
    print("=" * 70)
    print("  FRED DATA ASSISTANT")
    print("  Google ADK + FastMCP + Federal Reserve Economic Data")
    print("=" * 70)

    session_service = InMemorySessionService()
    runner = Runner(
        agent=create_agent(),
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("\nAsk about any economic series (e.g. 'What is the latest US CPI?').")
    print("Type 'quit' to exit.\n")

    while True:
        try:
            question = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n👋 Goodbye!")
            break

        if question.lower() in _EXIT_WORDS:
            print("👋 Goodbye!")
            break
        if not question:
            continue

        print("-" * 70)
        answer = await ask(runner, session.id, question)
        print("-" * 70)
        if answer:
            print(f"\n🤖 Agent:\n\n{answer}")
        else:
            print("\n⚠️  No response generated. Check the server log above for errors.")


if __name__ == "__main__":
    asyncio.run(run_agent())
