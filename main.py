# =============================================================================
# main.py  -  Entry Point for the Travel Journal Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (OPENROUTER_API_KEY, TRAVEL_TRACKER_* settings)
#   2. Creates the Google ADK agent (agent/journal_agent.py)
#   3. Starts an interactive session
#   4. Sends each line you type to the agent and prints its answer,
#      showing every tool it calls along the way
#
# Every change the agent makes is saved immediately by the tool server to
# TRAVEL_TRACKER_DATA_PATH (default ~/.travel-tracker/travel-data.json).
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads OPENROUTER_API_KEY when the agent is created, so the .env
# file must be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.journal_agent import create_agent
from core.storage import default_data_path

APP_NAME = "travel_tracker"
USER_ID = "traveler"


async def run_agent():
    """Run the travel journal agent interactively."""
    print("=" * 70)
    print("  TRAVEL JOURNAL")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print(f"\n📁 Travel record: {default_data_path()}")
    print("🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Tell me where you've been, or ask how much of the world you've seen.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
