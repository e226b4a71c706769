# app/services/analysis_service.py
"""
Scam scoring for free text
Keywords: 5 points each (case-insensitive), patterns: 10 points each
"""
from app.utils.errors import ValidationError


class AnalysisService:
    """Keyword and pattern scan of submitted text"""

    SCAM_KEYWORDS = [
        'urgent',
        'account suspended',
        'verify',
        'free gift',
        'click here',
        'you have won',
    ]

    # (pattern, description), matched case-sensitively
    SCAM_PATTERNS = [
        ('http://', 'Unsecure HTTP link'),
        ('bit.ly', 'URL shortener used'),
    ]

    KEYWORD_POINTS = 5
    PATTERN_POINTS = 10
    MAX_SCORE = 100

    HIGH_THRESHOLD = 50
    MEDIUM_THRESHOLD = 20

    SUGGESTIONS = {
        'High': [
            'This message is highly suspicious and likely a scam.',
            'Do not click any links or provide any personal information.',
            'Delete the message and block the sender if possible.',
        ],
        'Medium': [
            'This message shows several scam indicators.',
            'Be very cautious about any requests in the message.',
            'Verify the sender through official channels before responding.',
        ],
        'Low': [
            'No obvious scam indicators found, but remain cautious.',
            'Always verify unexpected messages with the supposed sender.',
            'Be wary of any requests for personal information.',
        ],
    }

    @staticmethod
    def analyze(text):
        """
        Score a message for scam indicators

        Args:
            text (str): Message to analyze

        Returns:
            dict: score, level, indicators and suggestions

        Raises:
            ValidationError: text is missing or empty
        """
        if not text or not isinstance(text, str):
            raise ValidationError('Text is required')

        indicators = []
        score = 0

        lowered = text.lower()
        found_keywords = [k for k in AnalysisService.SCAM_KEYWORDS if k.lower() in lowered]
        if found_keywords:
            score += len(found_keywords) * AnalysisService.KEYWORD_POINTS
            indicators.append({
                'type': 'keywords',
                'items': found_keywords,
                'description': f'Found {len(found_keywords)} scam-related keywords',
            })

        found_patterns = [
            description for pattern, description in AnalysisService.SCAM_PATTERNS
            if pattern in text
        ]
        if found_patterns:
            score += len(found_patterns) * AnalysisService.PATTERN_POINTS
            indicators.append({
                'type': 'patterns',
                'items': found_patterns,
                'description': f'Found {len(found_patterns)} suspicious patterns',
            })

        level = AnalysisService.get_level(score)

        return {
            'score': min(score, AnalysisService.MAX_SCORE),
            'level': level,
            'indicators': indicators,
            'suggestions': AnalysisService.get_suggestions(level),
        }

    @staticmethod
    def get_level(score):
        """High above 50, Medium above 20, Low otherwise"""
        if score > AnalysisService.HIGH_THRESHOLD:
            return 'High'
        if score > AnalysisService.MEDIUM_THRESHOLD:
            return 'Medium'
        return 'Low'

    @staticmethod
    def get_suggestions(level):
        """Advice block for a level; unknown levels get the Low block"""
        suggestions = AnalysisService.SUGGESTIONS.get(level, AnalysisService.SUGGESTIONS['Low'])
        return list(suggestions)
