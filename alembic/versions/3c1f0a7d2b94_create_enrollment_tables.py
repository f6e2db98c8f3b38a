"""Create enrollment tables

Revision ID: 3c1f0a7d2b94
Revises:
Create Date: 2025-06-02 09:12:44.318207
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3c1f0a7d2b94'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'student_details',
        sa.Column('lrn', sa.String(length=20), primary_key=True),
        sa.Column('firstname', sa.String(length=100), nullable=False),
        sa.Column('middlename', sa.String(length=100), nullable=True),
        sa.Column('lastname', sa.String(length=100), nullable=False),
        sa.Column('suffix', sa.String(length=20), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('sex', sa.String(length=10), nullable=True),
        sa.Column('civil_status', sa.String(length=20), nullable=True),
        sa.Column('nationality', sa.String(length=50), nullable=True),
        sa.Column('birthdate', sa.Date(), nullable=True),
        sa.Column('place_of_birth', sa.String(length=150), nullable=True),
        sa.Column('religion', sa.String(length=50), nullable=True),
        sa.Column('cpnumber', sa.String(length=20), nullable=True),
        sa.Column('home_add', sa.Text(), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('yearlevel', sa.String(length=20), nullable=True),
        sa.Column('strand', sa.String(length=50), nullable=False),
        sa.Column('student_type', sa.String(length=20), nullable=True),
        sa.Column('enrollment_status', sa.String(length=30), nullable=False),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('email', name='uq_student_details_email'),
    )

    op.create_table(
        'guardians',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('lrn', sa.String(length=20), nullable=False),
        sa.Column('fathers_name', sa.String(length=150), nullable=True),
        sa.Column('fathers_contact', sa.String(length=20), nullable=True),
        sa.Column('mothers_name', sa.String(length=150), nullable=True),
        sa.Column('mothers_contact', sa.String(length=20), nullable=True),
        sa.Column('guardian_name', sa.String(length=150), nullable=False),
        sa.Column('guardian_contact', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['lrn'], ['student_details.lrn'], name='fk_guardian_student', ondelete='CASCADE'),
        sa.UniqueConstraint('lrn', name='uq_guardians_lrn'),
    )

    op.create_table(
        'student_documents',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('lrn', sa.String(length=20), nullable=False),
        sa.Column('birth_cert', sa.Boolean(), nullable=True),
        sa.Column('form137', sa.Boolean(), nullable=True),
        sa.Column('good_moral', sa.Boolean(), nullable=True),
        sa.Column('report_card', sa.Boolean(), nullable=True),
        sa.Column('picture', sa.Boolean(), nullable=True),
        sa.Column('transcript_records', sa.Boolean(), nullable=True),
        sa.Column('honorable_dismissal', sa.Boolean(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['lrn'], ['student_details.lrn'], name='fk_documents_student', ondelete='CASCADE'),
        sa.UniqueConstraint('lrn', name='uq_student_documents_lrn'),
    )

    op.create_table(
        'document_verification_logs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('lrn', sa.String(length=20), nullable=False),
        sa.Column('document_type', sa.String(length=30), nullable=False),
        sa.Column('action', sa.String(length=20), nullable=False),
        sa.Column('verified_by', sa.String(length=100), nullable=False),
        sa.Column('verified_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_document_verification_logs_lrn', 'document_verification_logs', ['lrn'])

    op.create_table(
        'student_enrollments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('lrn', sa.String(length=20), nullable=False),
        sa.Column('school_year', sa.String(length=9), nullable=False),
        sa.Column('semester', sa.String(length=3), nullable=False),
        sa.Column('status', sa.String(length=30), nullable=False),
        sa.Column('enrollment_type', sa.String(length=20), nullable=False),
        sa.Column('grade_slip', sa.String(length=255), nullable=True),
        sa.Column('rejection_reason', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['lrn'], ['student_details.lrn'], name='fk_enrollment_student', ondelete='CASCADE'),
    )
    op.create_index('ix_student_enrollments_lrn', 'student_enrollments', ['lrn'])
    op.create_index('ix_student_enrollments_school_year', 'student_enrollments', ['school_year'])

    op.create_table(
        'semester_enrollment_windows',
        sa.Column('semester', sa.String(length=3), primary_key=True),
        sa.Column('value', sa.String(length=10), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )

    op.create_table(
        'student_accounts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('lrn', sa.String(length=20), nullable=False),
        sa.Column('track_code', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['lrn'], ['student_details.lrn'], name='fk_account_student', ondelete='CASCADE'),
        sa.UniqueConstraint('lrn', name='uq_student_accounts_lrn'),
    )
    op.create_index('ix_student_accounts_track_code', 'student_accounts', ['track_code'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_student_accounts_track_code', table_name='student_accounts')
    op.drop_table('student_accounts')
    op.drop_table('semester_enrollment_windows')
    op.drop_index('ix_student_enrollments_school_year', table_name='student_enrollments')
    op.drop_index('ix_student_enrollments_lrn', table_name='student_enrollments')
    op.drop_table('student_enrollments')
    op.drop_index('ix_document_verification_logs_lrn', table_name='document_verification_logs')
    op.drop_table('document_verification_logs')
    op.drop_table('student_documents')
    op.drop_table('guardians')
    op.drop_table('student_details')
