"""
Built-in translation lines used for default action titles and resource segments
"""

MESSAGES = {
    'en': {
        'routetree': {
            'createTitle': 'Create :resource',
            'createNavTitle': 'Create',
            'editTitle': 'Edit :resource: :item',
            'editNavTitle': 'Edit',
            'createSegment': 'create',
            'editSegment': 'edit',
        },
    },
    'de': {
        'routetree': {
            'createTitle': ':resource erstellen',
            'createNavTitle': 'Erstellen',
            'editTitle': ':resource bearbeiten: :item',
            'editNavTitle': 'Bearbeiten',
            'createSegment': 'erstellen',
            'editSegment': 'bearbeiten',
        },
    },
}
