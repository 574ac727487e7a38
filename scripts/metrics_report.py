import json

from Wolfbot.runtime import load_snapshot, recent_events, recent_receipts


def main():
    snapshot = load_snapshot()
    if not snapshot:
        print("No metrics snapshot found.")
    else:
        print(json.dumps(snapshot, ensure_ascii=False, indent=2))
    receipts = recent_receipts(limit=20)
    failed = [r for r in receipts if not r.get("ok")]
    print(f"Recent receipts: {len(receipts)} ({len(failed)} undelivered)")
    for row in receipts:
        status = "ok" if row.get("ok") else "FAILED " + str(row.get("error", ""))
        print(f"{row.get('ts')} [{row.get('turn_id')}] {row.get('action')} files={row.get('files')} {status}")
    errors = recent_events(limit=20, event="wolf_error")
    print(f"Recent errors: {len(errors)}")
    for row in errors:
        print(f"{row.get('ts')} [{row.get('turn_id')}] {row.get('error_code')}: {str(row.get('error'))[:180]}")


if __name__ == "__main__":
    main()
