from django import forms
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError

User = get_user_model()


class LoginForm(forms.Form):
    email = forms.EmailField()
    password = forms.CharField(strip=False)

    def clean_email(self):
        return (self.cleaned_data.get("email") or "").strip().lower()


class SignupForm(forms.Form):
    name = forms.CharField(max_length=160)
    email = forms.EmailField()
    password = forms.CharField(strip=False, min_length=6)

    def clean_name(self):
        name = (self.cleaned_data.get("name") or "").strip()
        if not name:
            raise ValidationError("Informe seu nome.")
        return name

    def clean_email(self):
        email = (self.cleaned_data.get("email") or "").strip().lower()
        if User.objects.filter(email__iexact=email).exists():
            raise ValidationError("E-mail já cadastrado.")
        return email

    def clean_password(self):
        password = self.cleaned_data.get("password") or ""
        validate_password(password)
        return password
