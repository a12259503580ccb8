from datetime import datetime, timezone

from ..models.company import Company


COMPANY_TABS = ("all", "requesting", "others")


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def fetch_all_companies(client):
    rows = client.select(Company.TABLE, order="created_at")
    return [Company.from_row(r) for r in rows]


def fetch_unverified_companies(client):
    rows = client.select(Company.TABLE, filters=[("is_verified", "eq", False)], order="created_at")
    return [Company.from_row(r) for r in rows]


def get_company(client, company_id):
    row = client.get(Company.TABLE, company_id)
    return Company.from_row(row) if row else None


def _set_verified(client, company_id, verified):
    row = client.update(Company.TABLE, company_id, {
        "is_verified": verified,
        "updated_at": _now_iso(),
    })
    return Company.from_row(row)


def verify_company(client, company_id):
    return _set_verified(client, company_id, True)


def reject_company(client, company_id):
    return _set_verified(client, company_id, False)


def filter_companies(companies, tab="all"):
    if tab == "requesting":
        return [c for c in companies if c.is_requesting_verification]
    if tab == "others":
        return [c for c in companies if not c.is_requesting_verification]
    return list(companies)


def sort_companies(companies):
    """Companies waiting for verification first, then newest first."""
    by_newest = sorted(companies, key=lambda c: c.created_at or "", reverse=True)
    return sorted(by_newest, key=lambda c: 0 if c.is_requesting_verification else 1)


def tab_counts(companies):
    requesting = sum(1 for c in companies if c.is_requesting_verification)
    return {"all": len(companies), "requesting": requesting, "others": len(companies) - requesting}
