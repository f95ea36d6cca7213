#!/usr/bin/env python3
"""
report.py: print the revision plan from the local skill database.

Reads skills straight from the database (no API server needed), applies
decay, and prints what to practice today and this week.  All data lives
under DATA_ROOT (configured in .env, defaults to ~/Documents/skillfade).

Usage:
    python report.py [--days N]

With --days, also prints each skill's projected score N days from now.
"""

from __future__ import annotations

import os
import sys

# Ensure the src/ directory is on the path so skillfade imports resolve
# when running this script directly from the repo root.
_SRC = os.path.join(os.path.dirname(__file__), "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)


def _parse_days(argv: list[str]) -> int | None:
    if not argv:
        return None
    if len(argv) != 2 or argv[0] != "--days" or not argv[1].isdigit():
        print("Usage: python report.py [--days N]", file=sys.stderr)
        sys.exit(1)
    return int(argv[1])


def main() -> None:
    days = _parse_days(sys.argv[1:])

    # Deferred so sys.path manipulation above takes effect first.
    from skillfade.config import decay_config, settings
    from skillfade.database import SessionLocal
    from skillfade.init_db import init_database
    from skillfade.services.skill_service import SkillService

    print(f"📁  Data root : {settings.data_root}")
    print(f"🗄️   Database  : {settings.database_url}")
    print()

    init_database()
    print()

    db = SessionLocal()
    try:
        service = SkillService(db, decay_config)
        plan = service.revision_plan()

        if plan.total_skills == 0:
            print("Add skills to get personalized revision suggestions")
            return

        if plan.practice_today:
            print("🚨  Critical - Practice Today")
            for item in plan.practice_today:
                print(f"    {item.name:<30} {item.score:5.0f}%   {item.message}")
            print()

        if plan.practice_this_week:
            print("📈  Practice This Week")
            for item in plan.practice_this_week:
                print(f"    {item.name:<30} {item.score:5.0f}%   {item.message}")
            print()

        if plan.healthy:
            print("✅  Doing Great")
            for item in plan.healthy:
                print(f"    {item.name:<30} {item.score:5.0f}%")
            if plan.more_healthy:
                print(f"    + {plan.more_healthy} more healthy skills")
            print()

        if days is not None:
            print(f"🔮  Projection in {days} days")
            for skill in service.list_skills():
                projection = service.project_skill(skill.id, days)
                final = projection.points[-1].score
                print(f"    {skill.name:<30} {skill.current_score:5.0f}% -> {final:5.0f}%")

    except Exception as exc:
        db.rollback()
        print(f"❌  Unexpected error: {exc}", file=sys.stderr)
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
