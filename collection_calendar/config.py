"""
This module contains configuration settings for the application.
"""
import logging

# District whose collections are printed
DISTRICT_NAME = "Arrondissement du Mont-Bellevue"

# Date formats
DATE_FORMAT = "%Y-%m-%d"
SHORT_DATE_FORMAT = "%m-%d"

# Legend printed after the calendar
LEGEND_TITLE = "Legende"
LEGEND = {
    "D": "Déchets",
    "R": "Récupération",
    "C": "Compost",
    "S": "Sapin",
    "E": "Encombrant et bois",
    "B": "Carton",
    "F": "Feuilles mortes",
}

# Keys of the schedule document
DOCUMENT_ROOT_KEY = "CALENDRIER_COLLECTES"
DOCUMENT_RECORDS_KEY = "COLLECTE_MATIERES_RESIDUELLES"

# Download settings for schedules fetched from the open data portal
DOWNLOAD_TIMEOUT = 30
DOWNLOAD_MAX_RETRIES = 3
DOWNLOAD_RETRY_DELAY = 5

# Logging
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"
