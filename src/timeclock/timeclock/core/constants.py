"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PAID_TIME_OFF = "PTO"
UNPAID_TIME_OFF = "UPTO"

DEFAULT_JOBS_PAGE_SIZE = 100
QUARTER_HOUR_MINUTES = 15

CSV_HEADER = ("Employee", "Email", "Group", "Date", "Job", "Task", "Duration", "Comment")

WORKBOOK_FILENAME = "TaskEntries.xlsx"
JOB_DETAILS_FILENAME = "JobDetails.xlsx"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

MIN_PASSWORD_LENGTH = 6
