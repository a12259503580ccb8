from flask_wtf import FlaskForm
from wtforms import SelectField, StringField
from wtforms.validators import Optional


class FreelancerFilterForm(FlaskForm):
    class Meta:
        csrf = False

    q = StringField("Search", validators=[Optional()])
    completion = SelectField(
        "Profile completion",
        choices=[("all", "All"), ("high", "High (80%+)"), ("medium", "Medium (50-79%)"), ("low", "Low (<50%)")],
        default="all",
    )
    location = SelectField("Location", choices=[("all", "All locations")], default="all")
