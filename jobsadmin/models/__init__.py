from .company import Company
from .job import Job, JobWithApplications, JOB_STATUSES
from .application import Application, APPLICATION_STATUSES
from .freelancer import Freelancer
from .user import AdminUser
from .stats import DashboardStats, MonthlyCount
