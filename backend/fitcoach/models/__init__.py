# Import all models here
from fitcoach.models.user_profile import UserProfile
from fitcoach.models.fitness_plan import FitnessPlan
from fitcoach.models.exercise_progress import ExerciseProgress
from fitcoach.models.custom_meal import CustomMeal
from fitcoach.models.exercise import Exercise
from fitcoach.models.notification import Notification, NotificationSettings
from fitcoach.models.coach_message import CoachMessage
