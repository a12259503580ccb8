from flask_wtf import FlaskForm
from wtforms import SelectField, SubmitField
from wtforms.validators import DataRequired

from ...models.application import APPLICATION_STATUSES
from ...models.job import JOB_STATUSES


def _choices(values):
    return [(v, v.replace("-", " ").capitalize()) for v in values]


class JobStatusForm(FlaskForm):
    status = SelectField("Status", choices=_choices(JOB_STATUSES), validators=[DataRequired()])
    submit = SubmitField("Update")


class ApplicationStatusForm(FlaskForm):
    status = SelectField("Status", choices=_choices(APPLICATION_STATUSES), validators=[DataRequired()])
    submit = SubmitField("Update")
