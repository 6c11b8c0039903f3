"""
Lease Check demo

Runs a small chain of title through the lease check engine and prints the
ownership report. Pass a JSON request file (same body as POST
/lease-check/run) to run your own chain instead.
"""

import argparse
import json
import sys

from leasecheck import LeaseCheckEngine, LeaseCheckError
from leasecheck.logging_config import configure_logger

SAMPLE_REQUEST = {
    "tract_key": "1S-2W Sec 14",
    "total_acres": 160,
    "hbp": False,
    "events": [
        {
            "doc_id": "1952-004411",
            "instrument_type": "Patent",
            "recorded": "1952-03-02",
            "grantors": [],
            "grantees": ["A"],
            "tracts": [{"trs": "1S-2W", "sec": "14"}],
            "fraction_whole": "1/1"
        },
        {
            "doc_id": "2010-000123",
            "instrument_type": "WD",
            "recorded": "2010-01-01",
            "grantors": ["A"],
            "grantees": ["B", "C"],
            "tracts": [{"trs": "1S-2W", "sec": "14"}],
            "conveys_all_interest": True
        },
        {
            "doc_id": "2012-000456",
            "instrument_type": "Mineral Deed",
            "recorded": "2012-06-15",
            "grantors": ["C"],
            "grantees": ["D"],
            "tracts": [{"trs": "1S-2W", "sec": "14"}],
            "fraction_whole": "1/4"
        },
        {
            "doc_id": "2015-000789",
            "instrument_type": "Oil and Gas Lease",
            "recorded": "2015-09-01",
            "grantors": ["B"],
            "grantees": ["Operator LLC"],
            "tracts": [{"trs": "1S-2W", "sec": "14"}]
        },
        {
            "doc_id": "2018-001010",
            "instrument_type": "Life Estate Deed",
            "recorded": "2018-02-20",
            "grantors": ["D"],
            "grantees": ["E"],
            "tracts": [{"trs": "1S-2W", "sec": "14"}],
            "life_estate": {"present": True}
        }
    ]
}


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Compute tract ownership from instrument records")
    parser.add_argument("request_file", nargs="?", help="JSON file with events and tract_key")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    args = parser.parse_args()

    configure_logger(level=args.log_level)

    if args.request_file:
        with open(args.request_file, 'r', encoding='utf-8') as f:
            request = json.load(f)
    else:
        request = SAMPLE_REQUEST

    engine = LeaseCheckEngine()

    print("=" * 60)
    print("Lease Check - Computing Ownership")
    print("=" * 60)
    print(f"\nTract: {request.get('tract_key')}")
    print(f"Instruments: {len(request.get('events') or [])}")

    try:
        report = engine.run(
            request.get("events") or [],
            request.get("tract_key") or "",
            as_of=request.get("as_of"),
            hbp=bool(request.get("hbp")),
            total_acres=request.get("total_acres"),
            lease_overrides=request.get("lease_overrides")
        )
    except LeaseCheckError as e:
        print(f"\n❌ LEASE CHECK ERROR: {e}")
        return 1

    print("\n" + "=" * 60)
    print("OWNERSHIP REPORT")
    print("=" * 60)
    print(json.dumps(report.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
