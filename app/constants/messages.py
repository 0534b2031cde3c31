# Description: This file contains constant messages used in the application.
MIGRATIONS_APPLIED_MESSAGE = "Database migrations applied successfully."
MIGRATIONS_FAILED_MESSAGE = "An error occurred while applying database migrations"
