"""Internal constants shared across the library."""

USER_AGENT = "parkstatus/1 (+aiohttp)"

PLACES_BASE_URL = "https://places.googleapis.com"
FIRESTORE_BASE_URL = "https://firestore.googleapis.com"
FIRESTORE_DATABASE = "(default)"

#: Root collection holding one document per location; votes live in a
#: ``votes`` subcollection keyed by voter.
VOTES_ROOT_COLLECTION = "parking_votes"
VOTES_SUBCOLLECTION = "votes"

PLACES_FIELD_MASK = "places.id,places.displayName,places.location,places.googleMapsUri"
PLACES_INCLUDED_TYPES: tuple[str, ...] = ("parking",)

# ------------------------------------------------------------------
# Aggregation
# ------------------------------------------------------------------

HALF_LIFE_MINUTES = 120.0
MAX_VOTES = 200

# ------------------------------------------------------------------
# Nearby search
# ------------------------------------------------------------------

LIST_RADIUS_METERS = 5000.0
MAP_RADIUS_METERS = 3500.0
NEARBY_LIMIT = 20
PROXIMITY_THRESHOLD_METERS = 150.0

#: Katowice city centre, used when the observer position is unknown.
FALLBACK_LATITUDE = 50.2648919
FALLBACK_LONGITUDE = 19.0237815

DEFAULT_DISPLAY_NAME = "Parking"
ANONYMOUS_VOTER_KEY = "anon"
