from enum import Enum


class ResultCategory(Enum):
    """Result log files, relative to the run directory"""
    SUCCESS = 'success.txt'
    ERROR = 'error.txt'
    COMPLETE = 'complete.txt'
    TAGS_SUCCESS = 'tags/success.txt'
    TAGS_ERROR = 'tags/error.txt'
    OG_IMAGES_SUCCESS = 'og_images/success.txt'
    OG_IMAGES_ERROR = 'og_images/error.txt'
