"""Cloud Functions entry point.

Binds creation of ``notifications/{docId}`` documents to the push relay.
Deploy with ``firebase deploy --only functions``.
"""

from firebase_functions import firestore_fn

from streetlight_alerts.common.constants import NOTIFICATION_DOCUMENT_PATH
from streetlight_alerts.trigger.firestore import on_notification_create


@firestore_fn.on_document_created(document=NOTIFICATION_DOCUMENT_PATH)
def on_notification_created(
    event: firestore_fn.Event[firestore_fn.DocumentSnapshot | None],
) -> None:
    """Send the FCM push for a newly created notification document."""
    on_notification_create(event)
