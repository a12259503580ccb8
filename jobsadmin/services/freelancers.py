from ..models.freelancer import Freelancer


COMPLETION_BUCKETS = ("all", "high", "medium", "low")


def fetch_all_freelancers(client):
    rows = client.select(Freelancer.TABLE, order="created_at")
    return [Freelancer.from_row(r) for r in rows]


def get_freelancer(client, freelancer_id):
    row = client.get(Freelancer.TABLE, freelancer_id)
    return Freelancer.from_row(row) if row else None


def _matches_query(f, q):
    for value in (f.display_name, f.email, f.professional_title, f.location):
        if value and q in value.lower():
            return True
    return False


def _in_bucket(completion, bucket):
    completion = completion or 0
    if bucket == "high":
        return completion >= 80
    if bucket == "medium":
        return 50 <= completion < 80
    if bucket == "low":
        return completion < 50
    return True


def filter_freelancers(freelancers, query=None, completion="all", location="all"):
    items = list(freelancers)
    if query:
        q = query.strip().lower()
        if q:
            items = [f for f in items if _matches_query(f, q)]
    if completion and completion != "all":
        items = [f for f in items if _in_bucket(f.profile_completion, completion)]
    if location and location != "all":
        items = [f for f in items if f.location == location]
    return items


def unique_locations(freelancers):
    return sorted({f.location for f in freelancers if f.location and f.location.strip()})
