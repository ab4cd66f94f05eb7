from datetime import datetime, timezone
from tabulate import tabulate
from secretweave.codec import to_decimal

REPORT_TITLE = "SHAMIR SECRET SHARING RESULTS"
NO_RESULT = "no result"

def results_table(results) -> str:
    rows = [
        [result.name, to_decimal(result.secret) if result.ok else NO_RESULT, result.error or "ok"]
        for result in results
    ]
    # Secrets can be far wider than any float; keep them as text
    return tabulate(rows, headers=["Dataset", "Constant (c)", "Status"], disable_numparse=True)

def render_report(results, generated_at=None) -> str:
    generated_at = generated_at or datetime.now(timezone.utc)
    lines = [REPORT_TITLE, "=" * len(REPORT_TITLE), ""]
    lines.append(results_table(results))
    lines.append("")

    for i, result in enumerate(results, 1):
        lines.append(f"Test Case {i} ({result.name}):")
        lines.append(f"Constant (c): {to_decimal(result.secret) if result.ok else NO_RESULT}")
        lines.append("")

    lines.append("Note: exact integer arithmetic, no fixed-width numbers")
    lines.append("Algorithm: Lagrange Interpolation")
    lines.append(f"Time: {generated_at.isoformat()}")
    return "\n".join(lines) + "\n"

def write_report(results, filename, generated_at=None):
    with open(filename, "w") as f:
        f.write(render_report(results, generated_at))
    return filename
