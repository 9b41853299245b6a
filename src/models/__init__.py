# src/models/__init__.py
from src.models.diary import Diary
from src.models.date_weather import DateWeather
