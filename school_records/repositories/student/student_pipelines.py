"""Student Domain Pipelines - Aggregations (SoC)"""
from datetime import datetime
from typing import Dict, List

def build_form_count_pipeline(since: datetime, until: datetime) -> List[Dict]:
    """Registrations per year of creation, gender counts collected per year"""
    return [
        {"$match": {"createdAt": {"$gte": since, "$lte": until}}},
        {"$group": {
            "_id": {"year": {"$year": "$createdAt"}, "gender": "$gender"},
            "count": {"$sum": 1}
        }},
        {"$group": {
            "_id": "$_id.year",
            "counts": {"$push": {"gender": "$_id.gender", "count": "$count"}}
        }},
        {"$sort": {"_id": 1}}
    ]
