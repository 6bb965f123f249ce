#!/usr/bin/env python
"""
Example script for calling the Architecture Advisor comparison API.

This script demonstrates how to compare architecture patterns for a
project context and print the recommendation.
"""

import asyncio
import json
import sys
from typing import Any, Dict

import httpx

API_URL = "http://localhost:8000/api/comparison/compare"

# Sample comparison request
SAMPLE_REQUEST = {
    "patternIds": ["monolithic", "microservices", "serverless"],
    "projectContext": {
        "teamSize": "small",
        "budget": "low",
        "timeline": "short",
        "expectedScale": "medium",
        "complexity": "low",
    },
}


async def compare_patterns(request_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Call the API to compare architecture patterns.

    Args:
        request_data: The request payload with pattern ids and project context

    Returns:
        Dict[str, Any]: The API response with ranked patterns and recommendation
    """
    async with httpx.AsyncClient() as client:
        response = await client.post(API_URL, json=request_data, timeout=10.0)

        if response.status_code != 200:
            print(f"Error: {response.status_code}")
            print(response.text)
            return {}

        return response.json()


def display_results(results: Dict[str, Any]) -> None:
    """
    Display the comparison results in a readable format.

    Args:
        results: The API response with comparison results
    """
    if not results:
        return

    print("\n====== ARCHITECTURE COMPARISON ======\n")

    print("RANKING:")
    for position, pattern in enumerate(results.get("patterns", []), start=1):
        print(f"{position}. {pattern['name']} ({pattern['weightedScore']:.2f})")

    recommendation = results.get("recommendation", {})
    best = recommendation.get("bestPattern", {})
    print(f"\nRECOMMENDED: {best.get('name', 'N/A')}")
    for reason in recommendation.get("reasoning", []):
        print(f"- {reason}")

    for alternative in recommendation.get("alternatives", []):
        print(f"\nALTERNATIVE: {alternative['pattern']['name']}")
        for reason in alternative.get("reasoning", []):
            print(f"- {reason}")


async def main(request_data: Dict[str, Any] = None) -> None:
    """
    Main function to run the example.

    Args:
        request_data: Optional custom request data
    """
    if request_data is None:
        request_data = SAMPLE_REQUEST

    print("Calling Architecture Advisor API...")
    print(f"Comparing: {', '.join(request_data['patternIds'])}")

    results = await compare_patterns(request_data)
    display_results(results)


if __name__ == "__main__":
    # Optional path to a JSON request file
    if len(sys.argv) > 1:
        try:
            with open(sys.argv[1], "r") as f:
                custom_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Error loading JSON file: {e}")
            sys.exit(1)
        asyncio.run(main(custom_data))
    else:
        asyncio.run(main())
