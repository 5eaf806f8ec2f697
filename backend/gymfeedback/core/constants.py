# Reference data for the LIMIT FITNESS feedback page.

PROFESSORS_TABLE = "professors"
RATINGS_TABLE = "ratings"
SURVEYS_TABLE = "survey_responses"
FEEDBACKS_TABLE = "feedbacks"

# Monthly survey. Answers are keyed by str(question id).
SURVEY_QUESTIONS = [
    {"id": 1, "question": "Como você avalia a limpeza e higiene da academia?", "type": "rating"},
    {"id": 2, "question": "Os equipamentos estão em bom estado de conservação?", "type": "rating"},
    {"id": 3, "question": "A climatização (ar-condicionado/ventilação) é adequada?", "type": "rating"},
    {"id": 4, "question": "O horário de funcionamento atende suas necessidades?", "type": "yesno"},
    {"id": 5, "question": "Você está satisfeito com o atendimento dos professores?", "type": "rating"},
    {"id": 6, "question": "De 0 a 10, qual a probabilidade de indicar a LIMIT para um amigo?", "type": "nps"},
    {"id": 7, "question": "O que podemos melhorar para você?", "type": "text"},
]
NPS_QUESTION_ID = "6"

FEEDBACK_CATEGORIES = [
    {"id": "equipamentos", "label": "Equipamentos", "icon": "🏋️"},
    {"id": "limpeza", "label": "Limpeza", "icon": "🧹"},
    {"id": "atendimento", "label": "Atendimento", "icon": "👥"},
    {"id": "horarios", "label": "Horários", "icon": "🕐"},
    {"id": "aulas", "label": "Aulas", "icon": "📋"},
    {"id": "estrutura", "label": "Estrutura", "icon": "🏢"},
    {"id": "outros", "label": "Outros", "icon": "📝"},
]

ACADEMY_INFO = {
    "name": "LIMIT FITNESS",
    "slogan": "Treine até o seu limite!",
    "address": "Av. Othon Bezerra de Melo, 2025 - Centro, Curvelo-MG",
    "phone": "(38) 99866-5666",
    "whatsapp": "5538998665666",
    "instagram": "academialimitfitness",
    "email": "limitcurvelo@gmail.com",
}

RATING_LABELS = ["", "😞 Péssimo", "😕 Ruim", "😐 Regular", "😊 Bom", "🤩 Excelente"]

# Shown on the home screen when the database can't be reached.
DEFAULT_STATS = {"average_rating": 4.6, "total_feedbacks": 465, "satisfaction_rate": 98}

DEFAULT_PROFESSORS = [
    {"id": "1", "name": "Prof. Carlos Silva", "specialty": "Musculação", "avatar": "💪", "rating": 4.8, "reviews_count": 124},
    {"id": "2", "name": "Prof. Ana Santos", "specialty": "Funcional", "avatar": "🏃‍♀️", "rating": 4.9, "reviews_count": 98},
    {"id": "3", "name": "Prof. Ricardo Lima", "specialty": "Personal Trainer", "avatar": "🎯", "rating": 4.7, "reviews_count": 156},
    {"id": "4", "name": "Prof. Marina Costa", "specialty": "Spinning", "avatar": "🚴", "rating": 4.9, "reviews_count": 87},
    {"id": "5", "name": "Prof. João Pedro", "specialty": "Crossfit", "avatar": "🔥", "rating": 4.6, "reviews_count": 72},
    {"id": "6", "name": "Recepção", "specialty": "Atendimento Geral", "avatar": "👋", "rating": 4.8, "reviews_count": 203},
]
