"""
Basic usage examples for the nl-classifier-client SDK.

Run from the repository root after installing::

    pip install -e .
    export NLC_USERNAME=... NLC_PASSWORD=...
    python examples/basic_usage.py metadata.json weather_data_train.csv
"""

import asyncio
import sys

from nl_classifier import (
    AsyncNaturalLanguageClassifier,
    NaturalLanguageClassifier,
    NaturalLanguageClassifierError,
    ServiceError,
)


def main(metadata_path: str, data_path: str):
    with NaturalLanguageClassifier() as nlc:
        # ------------------------------------------------------------------
        # 1. Existing classifiers
        # ------------------------------------------------------------------
        print("=== Classifiers ===")
        for model in nlc.list_classifiers():
            print(f"  {model.classifier_id}  {model.name or '-'}  ({model.language})")
        print()

        # ------------------------------------------------------------------
        # 2. Create a classifier from training files
        # ------------------------------------------------------------------
        print("=== Create ===")
        details = nlc.create_classifier(metadata_path, data_path)
        print(f"  Id          : {details.classifier_id}")
        print(f"  Status      : {details.status}")
        print(f"  Description : {details.status_description}")
        print()

        # ------------------------------------------------------------------
        # 3. Classify (only works once training has finished)
        # ------------------------------------------------------------------
        print("=== Classify ===")
        details = nlc.get_classifier(details.classifier_id)
        if details.is_available:
            result = nlc.classify(details.classifier_id, "How hot will it be today?")
            print(f"  Top class   : {result.top_class}")
            for item in result.classes:
                print(f"    {item.class_name}: {item.confidence:.2%}")
        else:
            try:
                nlc.classify(details.classifier_id, "How hot will it be today?")
            except ServiceError as exc:
                print(f"  Not ready   : {exc.code} {exc.reason} - {exc.description}")
        print()

        # ------------------------------------------------------------------
        # 4. Asynchronous variant
        # ------------------------------------------------------------------
        print("=== Async ===")
        print(f"  Classifiers : {len(asyncio.run(_list_async()))}")
        print()

        # ------------------------------------------------------------------
        # 5. Clean up
        # ------------------------------------------------------------------
        nlc.delete_classifier(details.classifier_id)
        print(f"Deleted {details.classifier_id}")


async def _list_async():
    async with AsyncNaturalLanguageClassifier() as nlc:
        return await nlc.list_classifiers()


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(2)
    try:
        main(sys.argv[1], sys.argv[2])
    except NaturalLanguageClassifierError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
