from __future__ import annotations

SUPPORTED_LANGUAGES = ("it", "en")

MESSAGES: dict[str, dict[str, str]] = {
    "required_fields": {
        "it": "Per favore, compila tutti i campi richiesti.",
        "en": "Please fill in all required fields.",
    },
    "time_not_found": {
        "it": "Orario non trovato per la data selezionata.",
        "en": "Time not found for the selected date.",
    },
    "too_many_participants": {
        "it": "Il numero di partecipanti supera il massimo consentito ({max}).",
        "en": "The number of participants exceeds the maximum allowed ({max}).",
    },
    "booking_error": {
        "it": "Errore durante la prenotazione. Riprova.",
        "en": "Error during booking. Please try again.",
    },
    "booking_confirmed_title": {
        "it": "Prenotazione Confermata!",
        "en": "Booking Confirmed!",
    },
    "booking_confirmed_message": {
        "it": "Grazie per la tua prenotazione. Riceverai presto un'email di conferma con tutti i dettagli.",
        "en": "Thank you for your booking. You will soon receive a confirmation email with all the details.",
    },
    "booking_not_found": {
        "it": "Prenotazione non trovata.",
        "en": "Booking not found.",
    },
    "item_not_found": {
        "it": "Elemento non trovato.",
        "en": "Item not found.",
    },
    "already_paid": {
        "it": "Questa prenotazione risulta già pagata.",
        "en": "This booking has already been paid.",
    },
    "checkout_not_available": {
        "it": "Il pagamento online non è disponibile per questa prenotazione.",
        "en": "Online payment is not available for this booking.",
    },
    "payment_params_missing": {
        "it": "Parametri di pagamento mancanti o non validi",
        "en": "Missing or invalid payment parameters",
    },
    "payment_booking_missing": {
        "it": "Dettagli prenotazione non trovati",
        "en": "Booking details not found",
    },
    "payment_error": {
        "it": "Si è verificato un errore durante il pagamento",
        "en": "An error occurred during payment",
    },
    "load_error": {
        "it": "Errore nel caricamento dei dati: {reason}. Controlla la connessione e riprova.",
        "en": "Error loading data: {reason}. Please check your internet connection and try again.",
    },
}

RECEIPT_LABELS: dict[str, dict[str, str]] = {
    "it": {
        "heading": "Dettagli Prenotazione:",
        "item": "Voce",
        "detail": "Dettaglio",
        "title": "Titolo",
        "date": "Data",
        "time": "Orario",
        "participants": "Partecipanti",
        "total": "Prezzo Totale",
        "reference": "Riferimento",
        "name": "Nome",
        "email": "Email",
        "phone": "Telefono",
        "scan": "Scansiona per verificare la prenotazione",
    },
    "en": {
        "heading": "Booking Details:",
        "item": "Item",
        "detail": "Detail",
        "title": "Title",
        "date": "Date",
        "time": "Time",
        "participants": "Participants",
        "total": "Total Price",
        "reference": "Booking Reference",
        "name": "Customer Name",
        "email": "Customer Email",
        "phone": "Customer Phone",
        "scan": "Scan to verify booking",
    },
}


def normalize_language(language: str | None, default: str = "it") -> str:
    if language and language.lower() in SUPPORTED_LANGUAGES:
        return language.lower()
    return default


def t(key: str, language: str, **kwargs: object) -> str:
    text = MESSAGES[key].get(language) or MESSAGES[key]["en"]
    return text.format(**kwargs) if kwargs else text
